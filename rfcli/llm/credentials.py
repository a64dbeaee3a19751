# rfcli/llm/credentials.py
"""
Credential resolution for hosted summarization backends.

Rules:
- Backends must NOT read environment variables directly.
- Resolution order:
  1. Explicit value (e.g. passed by a test or an embedding program)
  2. The backend's configured env var (tldr.backends.<name>.api_key_env)
  3. Generic fallback env var RFCLI_LLM_API_KEY
- Fail with actionable errors.
"""

from __future__ import annotations

import os
from typing import Optional

from rfcli.core.exceptions import SummaryTransportError
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import TLDR

logger = get_logger(__name__)

GENERIC_API_KEY_ENV = "RFCLI_LLM_API_KEY"


class CredentialError(SummaryTransportError):
    """Raised when a hosted backend has no API key available."""

    pass


def resolve_api_key(
    *,
    backend: str,
    env_name: Optional[str],
    api_key: Optional[str] = None,
) -> str:
    """
    Resolve the bearer credential for a hosted backend.

    Raises:
        CredentialError: If no API key could be resolved.
    """
    if api_key:
        logger.debug(f"{TLDR} Using explicit API key for backend '{backend}'")
        return api_key

    if env_name:
        value = os.getenv(env_name)
        if value:
            logger.debug(f"{TLDR} Using API key from env '{env_name}' for backend '{backend}'")
            return value

    fallback = os.getenv(GENERIC_API_KEY_ENV)
    if fallback:
        logger.debug(f"{TLDR} Using API key from env '{GENERIC_API_KEY_ENV}' for backend '{backend}'")
        return fallback

    expected = ", ".join(name for name in (env_name, GENERIC_API_KEY_ENV) if name)
    raise CredentialError(f"API key for backend '{backend}' not found. Set one of: {expected}.")
