# rfcli/core/__init__.py
"""Shared building blocks: paths, HTTP client factory, exceptions."""

from rfcli.core.exceptions import (
    CacheIOError,
    FetchError,
    MalformedResponseError,
    RefreshError,
    RfcliError,
    SelectorUnavailableError,
    SummaryError,
    SummaryResponseError,
    SummaryTransportError,
    TransportError,
)
from rfcli.core.paths import CacheLocations

__all__ = [
    "CacheIOError",
    "CacheLocations",
    "FetchError",
    "MalformedResponseError",
    "RefreshError",
    "RfcliError",
    "SelectorUnavailableError",
    "SummaryError",
    "SummaryResponseError",
    "SummaryTransportError",
    "TransportError",
]
