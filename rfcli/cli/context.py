# rfcli/cli/context.py
"""
Central CLI context: loads configuration once and builds the components
commands need.

Anything that fails here (unreadable config, no cache directory) happens
before any interactive loop starts, so commands exit with a message.

Usage:
    ctx = CLIContext.load()
    session = ctx.read_session()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import typer

from rfcli.cli.ui import ui
from rfcli.config.loader import ConfigError, load_config
from rfcli.config.schema import RfcliConfig
from rfcli.core.exceptions import CacheIOError
from rfcli.core.paths import CacheLocations, user_config_path
from rfcli.llm.backends import create_backend
from rfcli.llm.summarizer import Summarizer
from rfcli.logging.logger import configure_logging, get_logger
from rfcli.logging.tags import CLI
from rfcli.reader.pager import Pager
from rfcli.reader.selector import FzfFinder, RfcSelector
from rfcli.reader.session import ReadSession
from rfcli.rfc.documents import DocumentCache
from rfcli.rfc.index import IndexCache
from rfcli.rfc.remote import RfcSource

logger = get_logger(__name__)


def _announce_refresh(event: str) -> None:
    if event == "start":
        ui.print("Updating RFC index from IETF...", style="yellow")
    elif event == "done":
        ui.print("Index updated successfully.", style="green")


@dataclass
class CLIContext:
    config: RfcliConfig
    config_path: Path
    locations: CacheLocations
    _source: Optional[RfcSource] = field(default=None, repr=False)

    @property
    def has_user_config(self) -> bool:
        return self.config_path.exists()

    @classmethod
    def load(cls, verbose: bool = False) -> "CLIContext":
        """Load config and resolve cache locations, or exit with a helpful message."""
        try:
            config_path = user_config_path()
            config = load_config(config_path)
            locations = CacheLocations.default(config.cache.dir)
        except (ConfigError, CacheIOError) as e:
            ui.error(str(e))
            raise typer.Exit(1)

        configure_logging(logging.DEBUG if verbose else config.logging.level)

        logger.debug(f"{CLI} Cache root {locations.root}")
        return cls(config=config, config_path=config_path, locations=locations)

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    @property
    def source(self) -> RfcSource:
        if self._source is None:
            self._source = RfcSource(self.config.source.base_url)
        return self._source

    def document_cache(self) -> DocumentCache:
        return DocumentCache(self.locations, self.source)

    def index_cache(self) -> IndexCache:
        return IndexCache(self.locations, self.source, on_refresh=_announce_refresh)

    def finder(self) -> FzfFinder:
        return FzfFinder(self.config.selector.command, self.config.selector.height)

    def selector(self, finder: Optional[FzfFinder] = None) -> RfcSelector:
        return RfcSelector(self.index_cache(), finder or self.finder())

    def pager(self) -> Pager:
        return Pager(self.config.read.pager)

    def read_session(self, finder: Optional[FzfFinder] = None) -> ReadSession:
        read = self.config.read
        return ReadSession(
            selector=self.selector(finder),
            documents=self.document_cache(),
            pager=self.pager(),
            ui=ui,
            pause_seconds=read.error_pause_seconds,
            max_consecutive_errors=read.max_consecutive_errors,
        )

    def summarizer(self, backend: Optional[str] = None, model: Optional[str] = None) -> Summarizer:
        """
        Raises:
            SummaryTransportError: Hosted backend without a credential
            KeyError: Unknown backend name
        """
        tldr = self.config.tldr
        name = backend or tldr.backend
        chat = create_backend(name, tldr.backends[name], model=model)
        return Summarizer(
            chat,
            context_lines=tldr.context_lines,
            section=tldr.section,
            section_lines=tldr.section_lines,
        )
