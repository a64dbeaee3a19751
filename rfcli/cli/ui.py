# rfcli/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from rfcli.cli.ui import ui, console

    ui.print("Updating RFC index from IETF...", style="yellow")
    ui.error("Error: RFC 99999: not found")
    with ui.spinner("Querying Groq Cloud..."):
        ...
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.markup import escape

console = Console()


class UI:
    """Unified, Rich-styled output for all commands."""

    def __init__(self, out: Console | None = None):
        self.console = out or console

    # -------------------------------------------------------------------------
    # Output Methods
    # -------------------------------------------------------------------------

    def print(self, msg: str, style: str = "") -> None:
        """Print with optional Rich styling. Message text is never parsed as markup."""
        if style:
            self.console.print(f"[{style}]{escape(msg)}[/{style}]")
        else:
            self.console.print(msg, markup=False, highlight=False)

    def error(self, msg: str) -> None:
        self.console.print(f"[red]✗[/red] {escape(msg)}")

    def info(self, msg: str) -> None:
        """Print an info/dim message."""
        self.console.print(f"[dim]{escape(msg)}[/dim]")

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    @contextmanager
    def spinner(self, msg: str) -> Iterator[None]:
        """Spin while a blocking call runs; cleared when the block exits."""
        with self.console.status(f"[magenta]{escape(msg)}[/magenta]", spinner="dots"):
            yield


ui = UI()
