# rfcli/core/exceptions.py
"""
Exception hierarchy for rfcli.

    RfcliError
    ├── TransportError            network / HTTP status failures
    ├── CacheIOError              local filesystem failures
    ├── MalformedResponseError    content present but not the expected shape
    ├── FetchError                an RFC document could not be retrieved
    ├── RefreshError              the RFC index could not be refreshed
    ├── SelectorUnavailableError  no fuzzy finder to run
    └── SummaryError
        ├── SummaryTransportError backend unreachable, auth, HTTP status
        └── SummaryResponseError  backend answered, but without a summary
                                  (also a MalformedResponseError, keeps .raw)

User cancellation is not an exception; see rfcli.reader.selector.
"""

from __future__ import annotations

from typing import Optional


class RfcliError(Exception):
    """Base error for rfcli."""

    pass


class TransportError(RfcliError):
    """Raised when a remote source cannot be reached or answers with an error status."""

    def __init__(self, message: str, url: str = "", status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class CacheIOError(RfcliError):
    """Raised when the local cache cannot be read or created."""

    pass


class MalformedResponseError(RfcliError):
    """Raised when a remote answer is present but cannot be interpreted."""

    def __init__(self, message: str, raw: str = ""):
        self.raw = raw
        super().__init__(message)


class FetchError(RfcliError):
    """Raised when an RFC document cannot be fetched."""

    def __init__(self, number: int, message: str):
        self.number = number
        super().__init__(f"RFC {number}: {message}")


class RefreshError(RfcliError):
    """Raised when a required index download fails."""

    pass


class SelectorUnavailableError(RfcliError):
    """Raised when the fuzzy finder program is not installed."""

    pass


class SummaryError(RfcliError):
    """Base error for TLDR generation."""

    pass


class SummaryTransportError(SummaryError):
    """The summarization backend could not be reached, refused us, or returned an error status."""

    pass


class SummaryResponseError(SummaryError, MalformedResponseError):
    """The backend answered, but the body did not contain a summary."""

    pass
