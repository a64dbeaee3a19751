# rfcli/cli/display.py
"""
Terminal rendering of TLDR summaries.

Models tend to add a chatty preamble and Markdown bold despite being told
not to; both are dropped here. Bullets get a cyan "•" and a hanging indent.
"""

from __future__ import annotations

import textwrap
from typing import Iterator, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from rfcli.cli.ui import console as default_console

MARGIN = 6
FILLER_PREFIXES = ("here is",)
FILLER_FRAGMENTS = ("summary of rfc",)


def is_filler(line: str) -> bool:
    lower = line.lower()
    return lower.startswith(FILLER_PREFIXES) or any(f in lower for f in FILLER_FRAGMENTS)


def summary_lines(summary: str, width: int) -> Iterator[tuple[bool, str]]:
    """
    Yield (is_bullet_start, text) pairs ready for printing.

    Continuation lines of a wrapped paragraph or bullet come back with
    is_bullet_start False.
    """
    wrap_width = max(width - MARGIN, 20)

    for raw in summary.splitlines():
        line = raw.strip()
        if not line or is_filler(line):
            continue

        line = line.replace("**", "")
        bullet = line.startswith(("*", "-"))
        if bullet:
            line = line[1:].strip()

        for i, wrapped in enumerate(textwrap.wrap(line, wrap_width) or [""]):
            yield bullet and i == 0, wrapped


def render_summary(number: int, summary: str, out: Optional[Console] = None) -> None:
    out = out or default_console
    out.print()
    out.print(Panel.fit(f"🚀 [bold]RFC[/bold] [bold yellow]{number}[/bold yellow]", border_style="bold cyan"))

    for bullet_start, text in summary_lines(summary, out.width):
        if bullet_start:
            out.print(f"  [bold cyan]•[/bold cyan] [bold white]{escape(text)}[/bold white]")
        else:
            out.print(f"    [bold white]{escape(text)}[/bold white]")
