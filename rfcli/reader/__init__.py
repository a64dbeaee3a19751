# rfcli/reader/__init__.py
"""Interactive reading: fuzzy selection, paging, and the read loop."""

from rfcli.reader.pager import Pager
from rfcli.reader.selector import (
    Cancelled,
    Chosen,
    FzfFinder,
    NoSelection,
    RfcSelector,
    SelectionOutcome,
)
from rfcli.reader.session import ReadSession, SessionState

__all__ = [
    "Cancelled",
    "Chosen",
    "FzfFinder",
    "NoSelection",
    "Pager",
    "ReadSession",
    "RfcSelector",
    "SelectionOutcome",
    "SessionState",
]
