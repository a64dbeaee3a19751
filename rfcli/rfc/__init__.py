# rfcli/rfc/__init__.py
"""RFC retrieval: remote source, on-disk caches, text normalization."""

from rfcli.rfc.documents import DocumentCache
from rfcli.rfc.index import IndexCache, RfcIndexEntry, candidate_lines, parse_entries
from rfcli.rfc.normalize import normalize
from rfcli.rfc.remote import RfcSource

__all__ = [
    "DocumentCache",
    "IndexCache",
    "RfcIndexEntry",
    "RfcSource",
    "candidate_lines",
    "normalize",
    "parse_entries",
]
