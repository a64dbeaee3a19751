# rfcli/cli/commands/tldr.py
"""
Summarize an RFC with a language model.

Usage:
    rfcli tldr 2616                  # configured backend and model
    rfcli tldr 2616 -m llama3.1 -b ollama
    rfcli tldr                       # pick the RFC interactively first

One request, no retries. Transport failures and answers without a summary
are reported differently; the latter include the raw response.
"""

from __future__ import annotations

from typing import Optional

import typer

from rfcli.cli.context import CLIContext
from rfcli.cli.display import render_summary
from rfcli.cli.ui import ui
from rfcli.core.exceptions import (
    RfcliError,
    SummaryError,
    SummaryResponseError,
    SummaryTransportError,
)
from rfcli.llm.summarizer import Summarizer
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import CLI
from rfcli.reader.selector import Cancelled, Chosen
from rfcli.rfc.normalize import normalize

logger = get_logger(__name__)


def _select(ctx: CLIContext) -> Optional[int]:
    """Run the finder until something is chosen or it is cancelled."""
    finder = ctx.finder()
    if not finder.available():
        ui.error(f"'{finder.command}' not found on PATH. Pass an RFC number instead.")
        raise typer.Exit(1)

    selector = ctx.selector(finder)
    while True:
        try:
            outcome = selector.select()
        except RfcliError as e:
            ui.error(f"Error: {e}")
            raise typer.Exit(1)

        if isinstance(outcome, Chosen):
            return outcome.number
        if isinstance(outcome, Cancelled):
            return None


def _summarize(summarizer: Summarizer, number: int, text: str) -> str:
    try:
        with ui.spinner(f"Querying {summarizer.backend.label}..."):
            return summarizer.summarize(number, text)
    except SummaryResponseError as e:
        ui.error(f"Error: {e}")
        ui.print(f"Debug: {e.raw}")
        raise typer.Exit(1)
    except SummaryTransportError as e:
        ui.error(f"Network Error: {e}")
        raise typer.Exit(1)


def command(
    number: Optional[int] = None,
    model: Optional[str] = None,
    backend: Optional[str] = None,
    verbose: bool = False,
) -> None:
    ctx = CLIContext.load(verbose=verbose)

    backends = ctx.config.tldr.backends
    if backend and backend not in backends:
        ui.error(f"Unknown backend '{backend}'. Configured: {', '.join(sorted(backends))}")
        raise typer.Exit(1)

    try:
        summarizer = ctx.summarizer(backend=backend, model=model)
    except SummaryError as e:
        ui.error(str(e))
        raise typer.Exit(1)

    if number is None:
        number = _select(ctx)
        if number is None:
            ui.print("No RFC selected. Exiting...")
            return

    try:
        raw = ctx.document_cache().fetch(number)
    except RfcliError as e:
        ui.error(f"Error fetching RFC {number}: {e}")
        raise typer.Exit(1)

    logger.debug(f"{CLI} tldr RFC {number} via {summarizer.backend.name} ({summarizer.backend.model})")
    summary = _summarize(summarizer, number, normalize(raw))
    render_summary(number, summary)
