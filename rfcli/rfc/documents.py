# rfcli/rfc/documents.py
"""
Read-through cache of raw RFC documents.

RFCs never change once published, so a cached file is returned as-is:
no freshness check, no expiry, no per-document refresh.
"""

from __future__ import annotations

from rfcli.core.exceptions import FetchError, TransportError
from rfcli.core.paths import CacheLocations
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import CACHE
from rfcli.rfc.remote import RfcSource
from rfcli.rfc.storage import atomic_write_text, read_text_exact

logger = get_logger(__name__)


class DocumentCache:
    """
    Maps an RFC number to its raw text on disk.

    Usage:
        docs = DocumentCache(CacheLocations.default(), RfcSource())
        text = docs.fetch(791)
    """

    def __init__(self, locations: CacheLocations, source: RfcSource):
        self.locations = locations
        self.source = source

    def contains(self, number: int) -> bool:
        return self.locations.document_path(number).is_file()

    def fetch(self, number: int) -> str:
        """
        Return the raw text of RFC `number`, downloading it on a cache miss.

        A failed write-through is logged and the downloaded text is still
        returned.

        Raises:
            FetchError: Invalid number, download failure, or unreadable cache entry
        """
        if number < 1:
            raise FetchError(number, "RFC numbers are positive integers")

        path = self.locations.document_path(number)

        if path.is_file():
            logger.debug(f"{CACHE} Hit for RFC {number} at {path}")
            try:
                return read_text_exact(path)
            except OSError as e:
                raise FetchError(number, f"cannot read cached copy {path}: {e}") from e

        logger.debug(f"{CACHE} Miss for RFC {number}, downloading")
        try:
            content = self.source.document(number)
        except TransportError as e:
            raise FetchError(number, str(e)) from e

        try:
            atomic_write_text(path, content)
            logger.debug(f"{CACHE} Stored RFC {number} at {path}")
        except OSError as e:
            logger.warning(f"{CACHE} Could not cache RFC {number} at {path}: {e}")

        return content
