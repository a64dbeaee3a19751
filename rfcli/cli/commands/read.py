# rfcli/cli/commands/read.py
"""
Search and read RFCs.

Usage:
    rfcli read               # pick from the cached index
    rfcli read -r            # refresh the index first
    rfcli read -q 791        # start the finder with a query

Loops until the finder is cancelled with Esc or Ctrl-C.
"""

from __future__ import annotations

from typing import Optional

import typer

from rfcli.cli.context import CLIContext
from rfcli.cli.ui import ui
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import CLI

logger = get_logger(__name__)


def command(refresh: bool = False, query: Optional[str] = None, verbose: bool = False) -> None:
    ctx = CLIContext.load(verbose=verbose)

    finder = ctx.finder()
    if not finder.available():
        ui.error(f"'{finder.command}' not found on PATH.")
        ui.info("Install fzf: https://github.com/junegunn/fzf")
        raise typer.Exit(1)

    logger.debug(f"{CLI} read refresh={refresh} query={query!r}")
    ctx.read_session(finder).run(force_refresh=refresh, initial_query=query)
