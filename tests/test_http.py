# tests/test_http.py
"""
Tests for the HTTP client factory and error mapping.
"""

from __future__ import annotations

import httpx
import pytest

from rfcli.core.http import (
    APIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    create_api_client,
    handle_api_error,
    raise_for_status,
)

pytestmark = pytest.mark.tier1


def status_error(status: int, **kwargs) -> httpx.HTTPStatusError:
    request = httpx.Request("POST", "https://api.example/chat")
    response = httpx.Response(status, request=request, **kwargs)
    return httpx.HTTPStatusError("failed", request=request, response=response)


class TestHandleApiError:
    """httpx exceptions to APIError subclasses."""

    @pytest.mark.parametrize(
        "status,cls",
        [(401, AuthenticationError), (403, AuthenticationError), (404, NotFoundError), (429, RateLimitError)],
    )
    def test_status_mapping(self, status, cls):
        error = handle_api_error(status_error(status), provider="groq")

        assert type(error) is cls
        assert error.status_code == status

    def test_other_status_is_plain_api_error(self):
        error = handle_api_error(status_error(500), provider="groq")

        assert type(error) is APIError
        assert "(HTTP 500)" in str(error)

    def test_json_error_message_becomes_details(self):
        exc = status_error(401, json={"error": {"message": "Invalid API Key"}})

        assert handle_api_error(exc, provider="groq").details == "Invalid API Key"

    def test_text_body_becomes_details(self):
        exc = status_error(500, text="upstream exploded")

        assert handle_api_error(exc).details == "upstream exploded"

    def test_connect_error(self):
        request = httpx.Request("GET", "https://x")
        error = handle_api_error(httpx.ConnectError("refused", request=request), provider="ollama")

        assert str(error).startswith("Failed to connect to ollama")
        assert isinstance(error.original_error, httpx.ConnectError)


class TestClientFactory:
    """create_api_client and raise_for_status."""

    def test_bearer_header(self):
        client = create_api_client("https://api.example", api_key="secret")

        assert client.headers["Authorization"] == "Bearer secret"

    def test_extra_headers_override_defaults(self):
        client = create_api_client("https://api.example", headers={"Accept": "text/plain"})

        assert client.headers["Accept"] == "text/plain"
        assert "Authorization" not in client.headers

    def test_raise_for_status_passes_success(self):
        request = httpx.Request("GET", "https://x")

        raise_for_status(httpx.Response(200, request=request))

    def test_raise_for_status_raises_api_error(self):
        request = httpx.Request("GET", "https://x")

        with pytest.raises(NotFoundError):
            raise_for_status(httpx.Response(404, request=request), provider="rfc-editor")
