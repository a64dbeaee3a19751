# rfcli/rfc/index.py
"""
The RFC master index: on-disk cache and line parsing.

rfc-index.txt is a long preamble followed by entries such as:

    0791 Internet Protocol. J. Postel. September 1981. (Format: TXT=97779
         bytes) (Obsoletes RFC0760) (Updated by RFC1349, RFC2474, RFC6864)
         (Also STD0005) (Status: INTERNET STANDARD) (DOI: 10.17487/RFC0791)

Only lines whose first non-blank character is a digit are entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from rfcli.core.exceptions import CacheIOError, RefreshError, TransportError
from rfcli.core.paths import CacheLocations
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import INDEX
from rfcli.rfc.remote import RfcSource
from rfcli.rfc.storage import atomic_write_text, read_text_exact

logger = get_logger(__name__)


# =============================================================================
# Parsing
# =============================================================================


@dataclass(frozen=True)
class RfcIndexEntry:
    number: int
    title: str


def is_candidate(line: str) -> bool:
    stripped = line.lstrip()
    return bool(stripped) and stripped[0] in "0123456789"


def candidate_lines(index_text: str) -> list[str]:
    """Index lines offered to the selector, in file order."""
    return [line for line in index_text.splitlines() if is_candidate(line)]


def parse_number(line: str) -> Optional[int]:
    """
    Leading whitespace-delimited token of `line` as a positive integer.

    Returns None when there is no token or it is not a positive integer.

    Examples:
        >>> parse_number("0791 Internet Protocol.")
        791
        >>> parse_number("RFC791") is None
        True
    """
    tokens = line.split()
    if not tokens or not (tokens[0].isascii() and tokens[0].isdigit()):
        return None
    number = int(tokens[0])
    return number if number > 0 else None


def parse_entries(index_text: str) -> Iterator[RfcIndexEntry]:
    for line in candidate_lines(index_text):
        number = parse_number(line)
        if number is None:
            continue
        title = line.strip().split(None, 1)
        yield RfcIndexEntry(number=number, title=title[1] if len(title) > 1 else "")


# =============================================================================
# Cache
# =============================================================================


class IndexCache:
    """
    Single on-disk copy of rfc-index.txt.

    The file is only ever replaced wholesale: a failed refresh leaves the
    previous copy byte-for-byte intact.
    """

    def __init__(
        self,
        locations: CacheLocations,
        source: RfcSource,
        on_refresh: Optional[Callable[[str], None]] = None,
    ):
        self.locations = locations
        self.source = source
        # Called with "start" / "done" around a download; used by the CLI for status lines.
        self.on_refresh = on_refresh

    @property
    def path(self):
        return self.locations.index_path

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self, force_refresh: bool = False) -> str:
        """
        Return the index text, downloading it if absent or if forced.

        A downloaded index that cannot be written is still returned.

        Raises:
            RefreshError: A required download failed (no stale copy is substituted)
            CacheIOError: The cache directory cannot be created or the file cannot be read
        """
        if force_refresh or not self.exists():
            return self.refresh()

        try:
            return read_text_exact(self.path)
        except OSError as e:
            raise CacheIOError(f"Cannot read index {self.path}: {e}") from e

    def refresh(self) -> str:
        self._notify("start")
        logger.info(f"{INDEX} Downloading RFC index to {self.path}")

        try:
            content = self.source.index()
        except TransportError as e:
            raise RefreshError(f"Could not update RFC index: {e}") from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheIOError(f"Cannot create cache directory {self.path.parent}: {e}") from e

        try:
            atomic_write_text(self.path, content)
        except OSError as e:
            logger.warning(f"{INDEX} Could not cache index at {self.path}: {e}")
        else:
            self._notify("done")

        return content

    def _notify(self, event: str) -> None:
        if self.on_refresh is not None:
            self.on_refresh(event)
