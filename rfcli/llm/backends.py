# rfcli/llm/backends.py
"""
Chat backends for TLDR generation.

Two interchangeable backends, both speaking JSON over httpx:

    HostedChatBackend   OpenAI-compatible /chat/completions (Groq by default),
                        bearer credential from the environment
    OllamaChatBackend   local Ollama server, /api/chat, no credential

Each makes exactly one request per call. Failures are split so callers can
tell them apart:

    SummaryTransportError   could not reach the backend, auth failed, HTTP error
    SummaryResponseError    the backend answered, but there was no summary in it
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

import httpx

from rfcli.config.schema import BackendConfig
from rfcli.core.exceptions import SummaryResponseError, SummaryTransportError
from rfcli.core.http import APIError, create_api_client, handle_api_error, raise_for_status
from rfcli.core.utils import extract_path
from rfcli.llm.credentials import resolve_api_key
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import TLDR

logger = get_logger(__name__)

Message = dict[str, str]


class ChatBackend:
    """
    Base class: one POST, one JSON body, one content path.

    Subclasses set endpoint and content_path and build the payload.
    """

    endpoint: ClassVar[str] = ""
    content_path: ClassVar[str] = ""
    display_name: ClassVar[str] = ""

    def __init__(
        self,
        name: str,
        base_url: str,
        model: str,
        client: Optional[httpx.Client] = None,
        api_key: Optional[str] = None,
        **kwargs: Any,
    ):
        self.name = name
        self.base_url = base_url.rstrip("/")
        self.model = model
        self._client = client or create_api_client(
            base_url=self.base_url,
            api_key=api_key,
            timeout_type="chat",
            **kwargs,
        )

    @property
    def label(self) -> str:
        return self.display_name or self.name

    def build_payload(self, messages: list[Message]) -> dict[str, Any]:
        raise NotImplementedError

    def complete(self, messages: list[Message]) -> str:
        """
        Send the messages and return the reply text.

        Raises:
            SummaryTransportError: Network, timeout, auth or HTTP status failure
            SummaryResponseError: Body is not JSON or has no reply content
        """
        payload = self.build_payload(messages)
        logger.debug(f"{TLDR} POST {self.base_url}{self.endpoint} model={self.model}")

        try:
            response = self._client.post(self.endpoint, json=payload)
            raise_for_status(response, provider=self.name, endpoint=self.endpoint)
        except APIError as exc:
            raise SummaryTransportError(str(exc)) from exc
        except httpx.HTTPError as exc:
            error = handle_api_error(exc, provider=self.name, endpoint=self.endpoint)
            raise SummaryTransportError(str(error)) from exc

        body = response.text
        try:
            data = response.json()
        except ValueError as exc:
            raise SummaryResponseError(f"{self.name} returned a non-JSON response.", raw=body) from exc

        try:
            content = extract_path(data, self.content_path)
        except (KeyError, IndexError) as exc:
            raise SummaryResponseError("API response did not contain a summary.", raw=body) from exc

        if not isinstance(content, str) or not content.strip():
            raise SummaryResponseError("API response did not contain a summary.", raw=body)

        return content

    def close(self) -> None:
        self._client.close()


class HostedChatBackend(ChatBackend):
    """OpenAI-compatible hosted endpoint (Groq, OpenAI, ...)."""

    endpoint: ClassVar[str] = "/chat/completions"
    content_path: ClassVar[str] = "choices[0].message.content"

    def __init__(
        self,
        name: str,
        base_url: str,
        model: str,
        api_key_env: Optional[str] = None,
        api_key: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        **kwargs: Any,
    ):
        key = resolve_api_key(backend=name, env_name=api_key_env, api_key=api_key)
        super().__init__(name, base_url, model, client=client, api_key=key, **kwargs)

    @property
    def label(self) -> str:
        return "Groq Cloud" if self.name == "groq" else self.name

    def build_payload(self, messages: list[Message]) -> dict[str, Any]:
        return {"model": self.model, "messages": messages}


class OllamaChatBackend(ChatBackend):
    """Local Ollama server."""

    endpoint: ClassVar[str] = "/api/chat"
    content_path: ClassVar[str] = "message.content"
    display_name: ClassVar[str] = "local Ollama"

    def build_payload(self, messages: list[Message]) -> dict[str, Any]:
        return {"model": self.model, "messages": messages, "stream": False}


def create_backend(
    name: str,
    config: BackendConfig,
    model: Optional[str] = None,
    client: Optional[httpx.Client] = None,
    **kwargs: Any,
) -> ChatBackend:
    """
    Build the backend named in tldr.backend.

    A backend with api_key_env is hosted; one without is treated as a
    local Ollama server.

    Raises:
        CredentialError: Hosted backend with no key in the environment
    """
    chosen_model = model or config.model
    if config.api_key_env:
        return HostedChatBackend(
            name,
            config.base_url,
            chosen_model,
            api_key_env=config.api_key_env,
            client=client,
            **kwargs,
        )
    return OllamaChatBackend(name, config.base_url, chosen_model, client=client, **kwargs)
