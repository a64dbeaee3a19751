# rfcli/core/http.py
"""
Centralized HTTP client factory.

Both the RFC source and the summarization backends build their httpx
clients here, so headers, timeouts and error mapping live in one place.

Usage:
    from rfcli.core.http import create_api_client, raise_for_status, handle_api_error

    client = create_api_client(
        base_url="https://api.groq.com/openai/v1",
        api_key=os.getenv("GROQ_API_KEY"),
        timeout_type="chat",
    )
    response = client.post("/chat/completions", json=payload)
    raise_for_status(response, provider="groq", endpoint="/chat/completions")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from rfcli.logging.logger import get_logger
from rfcli.logging.tags import HTTP

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


@dataclass
class APIError(Exception):
    """
    Structured API error with details.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if available)
        provider: Remote name (e.g., "rfc-editor", "groq")
        endpoint: Endpoint that failed
        details: Additional error details from the response body
        original_error: The original exception that caused this error
    """

    message: str
    status_code: Optional[int] = None
    provider: Optional[str] = None
    endpoint: Optional[str] = None
    details: Optional[str] = None
    original_error: Optional[Exception] = None

    def __str__(self) -> str:
        parts = [self.message]

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        if self.details:
            parts.append(f"- {self.details}")

        return " ".join(parts)


class RateLimitError(APIError):
    """Raised when the remote rate limit is exceeded."""

    pass


class AuthenticationError(APIError):
    """Raised when authentication fails."""

    pass


class NotFoundError(APIError):
    """Raised when the requested resource (RFC, model) doesn't exist."""

    pass


# =============================================================================
# Default Configuration
# =============================================================================

DEFAULT_TIMEOUTS = {
    "default": 30.0,
    "document": 30.0,
    "index": 60.0,  # rfc-index.txt is several MB
    "chat": 120.0,  # LLM generation can be slow
}

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": "rfcli",
}


# =============================================================================
# Client Factory
# =============================================================================


def create_api_client(
    base_url: str,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
    timeout_type: str = "default",
    headers: Optional[Dict[str, str]] = None,
    auth_header: str = "Authorization",
    auth_scheme: str = "Bearer",
    **kwargs: Any,
) -> httpx.Client:
    """
    Create a configured HTTP client.

    Args:
        base_url: Base URL (e.g., "https://www.rfc-editor.org")
        api_key: Bearer credential (optional)
        timeout: Request timeout in seconds (or use timeout_type)
        timeout_type: Preset timeout type ("default", "document", "index", "chat")
        headers: Additional headers to include
        auth_header: Header name for authentication
        auth_scheme: Authentication scheme
        **kwargs: Additional arguments passed to httpx.Client (e.g. transport)

    Returns:
        Configured httpx.Client instance
    """
    if timeout is None:
        timeout = DEFAULT_TIMEOUTS.get(timeout_type, DEFAULT_TIMEOUTS["default"])

    final_headers = dict(DEFAULT_HEADERS)

    if api_key:
        final_headers[auth_header] = f"{auth_scheme} {api_key}"

    if headers:
        final_headers.update(headers)

    client = httpx.Client(
        base_url=base_url,
        headers=final_headers,
        timeout=timeout,
        follow_redirects=True,
        **kwargs,
    )

    logger.debug(f"{HTTP} Created HTTP client for {base_url} (timeout={timeout}s)")

    return client


# =============================================================================
# Error Handling
# =============================================================================


def _error_details(response: httpx.Response) -> Optional[str]:
    try:
        error_data = response.json()
    except ValueError:
        return response.text[:200] if response.text else None

    if isinstance(error_data, dict):
        error = error_data.get("error")
        if isinstance(error, dict):
            return error.get("message")
        return error_data.get("message") or (error if isinstance(error, str) else None)
    return None


def handle_api_error(
    exc: Exception,
    provider: str = "unknown",
    endpoint: str = "",
) -> APIError:
    """
    Convert an httpx exception to a structured APIError.

    Example:
        try:
            response = client.get("/rfc/rfc791.txt")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise handle_api_error(exc, provider="rfc-editor") from exc
    """
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code
        details = _error_details(exc.response)

        if status_code in (401, 403):
            return AuthenticationError(
                message=f"{provider} authentication failed",
                status_code=status_code,
                provider=provider,
                endpoint=endpoint,
                details=details,
                original_error=exc,
            )
        elif status_code == 429:
            return RateLimitError(
                message=f"{provider} rate limit exceeded",
                status_code=status_code,
                provider=provider,
                endpoint=endpoint,
                details=details,
                original_error=exc,
            )
        elif status_code == 404:
            return NotFoundError(
                message=f"{provider} resource not found",
                status_code=status_code,
                provider=provider,
                endpoint=endpoint,
                details=details,
                original_error=exc,
            )
        else:
            return APIError(
                message=f"{provider} request failed",
                status_code=status_code,
                provider=provider,
                endpoint=endpoint,
                details=details,
                original_error=exc,
            )

    if isinstance(exc, httpx.ConnectError):
        return APIError(
            message=f"Failed to connect to {provider}",
            provider=provider,
            endpoint=endpoint,
            details=str(exc),
            original_error=exc,
        )

    if isinstance(exc, httpx.TimeoutException):
        return APIError(
            message=f"{provider} request timed out",
            provider=provider,
            endpoint=endpoint,
            original_error=exc,
        )

    return APIError(
        message=f"{provider} request failed: {exc}",
        provider=provider,
        endpoint=endpoint,
        original_error=exc,
    )


def raise_for_status(
    response: httpx.Response,
    provider: str = "unknown",
    endpoint: str = "",
) -> None:
    """
    Check response status and raise the matching APIError if it failed.

    Raises:
        APIError: If the response indicates an error
    """
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise handle_api_error(exc, provider=provider, endpoint=endpoint) from exc
