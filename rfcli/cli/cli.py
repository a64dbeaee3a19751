# rfcli/cli/cli.py
"""
rfcli - main application.

Commands:
    rfcli read      Fuzzy-search the RFC index and read RFCs in a pager
    rfcli tldr      Summarize an RFC with a language model
    rfcli config    Show the effective configuration

NOTE: Commands use lazy loading - imports happen only when a command is invoked.
"""

from __future__ import annotations

from typing import Optional

import typer

from rfcli import __version__

app = typer.Typer(
    name="rfcli",
    help="A fast RFC reader with fuzzy search and TLDR.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"rfcli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """A fast RFC reader with fuzzy search and TLDR."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


def _verbose(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("verbose"))


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("read")
def read(
    ctx: typer.Context,
    refresh: bool = typer.Option(False, "--refresh", "-r", help="Force update the local RFC index."),
    query: Optional[str] = typer.Option(None, "--query", "-q", help="Initial search query."),
) -> None:
    """Search and read an RFC."""
    from rfcli.cli.commands import read as mod

    mod.command(refresh=refresh, query=query, verbose=_verbose(ctx))


@app.command("tldr")
def tldr(
    ctx: typer.Context,
    number: Optional[int] = typer.Argument(None, min=1, help="RFC number (omit to search)."),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Model identifier override."),
    backend: Optional[str] = typer.Option(None, "--backend", "-b", help="Backend from tldr.backends."),
) -> None:
    """Get a summarized TLDR of an RFC."""
    from rfcli.cli.commands import tldr as mod

    mod.command(number=number, model=model, backend=backend, verbose=_verbose(ctx))


@app.command("config")
def config(
    ctx: typer.Context,
    show_path: bool = typer.Option(False, "--path", "-p", help="Show config file path."),
) -> None:
    """View the effective configuration."""
    from rfcli.cli.commands import config as mod

    mod.command(show_path=show_path, verbose=_verbose(ctx))


if __name__ == "__main__":
    app()
