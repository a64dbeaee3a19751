# rfcli/rfc/remote.py
"""
Remote RFC source.

    GET {base_url}/rfc/rfc<N>.txt       one document
    GET {base_url}/rfc/rfc-index.txt    the master index
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from rfcli.core.exceptions import TransportError
from rfcli.core.http import (
    DEFAULT_TIMEOUTS,
    APIError,
    create_api_client,
    handle_api_error,
    raise_for_status,
)
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import HTTP

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://www.rfc-editor.org"
PROVIDER = "rfc-editor"
INDEX_ENDPOINT = "/rfc/rfc-index.txt"


def document_endpoint(number: int) -> str:
    return f"/rfc/rfc{number}.txt"


class RfcSource:
    """Downloads raw RFC text and the index over HTTP."""

    def __init__(self, base_url: str = DEFAULT_BASE_URL, client: Optional[httpx.Client] = None, **kwargs: Any):
        self.base_url = base_url.rstrip("/")
        self._client = client or create_api_client(
            base_url=self.base_url,
            headers={"Accept": "text/plain"},
            **kwargs,
        )

    def document(self, number: int) -> str:
        """Raw text of RFC `number`. Raises TransportError."""
        return self._get(document_endpoint(number), timeout_type="document")

    def index(self) -> str:
        """Raw text of rfc-index.txt. Raises TransportError."""
        return self._get(INDEX_ENDPOINT, timeout_type="index")

    def close(self) -> None:
        self._client.close()

    def _get(self, endpoint: str, timeout_type: str) -> str:
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"{HTTP} GET {url}")

        try:
            response = self._client.get(endpoint, timeout=DEFAULT_TIMEOUTS[timeout_type])
            raise_for_status(response, provider=PROVIDER, endpoint=endpoint)
            return response.text
        except APIError as exc:
            raise TransportError(str(exc), url=url, status_code=exc.status_code) from exc
        except httpx.HTTPError as exc:
            error = handle_api_error(exc, provider=PROVIDER, endpoint=endpoint)
            raise TransportError(str(error), url=url) from exc
