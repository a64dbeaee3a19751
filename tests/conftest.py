# tests/conftest.py
"""
Shared fixtures.

Test Tiers:
- tier1: pure logic, no I/O
         Run: pytest -m tier1
- tier2: unit tests with mocks, temp dirs, httpx.MockTransport
         Run: pytest -m "tier1 or tier2"

No test touches the network or the real user cache/config directories.
"""

from __future__ import annotations

from typing import Optional

import pytest

from rfcli.core.exceptions import TransportError
from rfcli.core.paths import CacheLocations

SAMPLE_INDEX = """\
                             RFC INDEX
                           -------------

   (CREATED ON: 10/19/2026.)

This file contains citations for all RFCs in numeric order.

   RFC Entries

0001 Host Software. S. Crocker. April 1969. (Format: TXT=21088 bytes)
     (Status: UNKNOWN) (DOI: 10.17487/RFC0001)

0791 Internet Protocol. J. Postel. September 1981. (Format: TXT=97779
     bytes) (Obsoletes RFC0760) (Status: INTERNET STANDARD)

2616 Hypertext Transfer Protocol -- HTTP/1.1. R. Fielding, J. Gettys,
     J. Mogul, H. Frystyk, L. Masinter, P. Leach, T. Berners-Lee. June
     1999. (Format: TXT=422317 bytes) (Status: DRAFT STANDARD)
"""


class FakeSource:
    """Stands in for RfcSource; counts calls, can be switched offline."""

    def __init__(self, documents: Optional[dict[int, str]] = None, index: str = SAMPLE_INDEX):
        self.documents = documents or {}
        self.index_text = index
        self.online = True
        self.document_calls: list[int] = []
        self.index_calls = 0

    def document(self, number: int) -> str:
        self.document_calls.append(number)
        if not self.online:
            raise TransportError("Failed to connect to rfc-editor")
        if number not in self.documents:
            raise TransportError("rfc-editor resource not found (HTTP 404)", status_code=404)
        return self.documents[number]

    def index(self) -> str:
        self.index_calls += 1
        if not self.online:
            raise TransportError("Failed to connect to rfc-editor")
        return self.index_text


@pytest.fixture
def locations(tmp_path) -> CacheLocations:
    return CacheLocations.at(tmp_path / "cache")


@pytest.fixture
def fake_source() -> FakeSource:
    return FakeSource(documents={791: "INTERNET PROTOCOL\n\nbody\n", 2616: "HTTP/1.1\n"})


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point config and cache lookups at tmp_path and clear credentials."""
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    monkeypatch.delenv("RFCLI_CONFIG", raising=False)
    monkeypatch.delenv("GROQ_API_KEY", raising=False)
    monkeypatch.delenv("RFCLI_LLM_API_KEY", raising=False)
    return tmp_path


@pytest.fixture
def sample_index() -> str:
    return SAMPLE_INDEX
