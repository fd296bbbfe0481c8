# datachat/llm/credentials.py
"""
Credential resolution for the LLM endpoint.

Resolution order:
  1. Explicit config value (llm.api_key)
  2. DATACHAT_LLM_API_KEY
  3. LLMFOUNDRY_TOKEN
  4. OPENAI_API_KEY

Fails with an actionable error when nothing is found.
"""

from __future__ import annotations

import os
from typing import Optional

from datachat.core.exceptions import DatachatError
from datachat.logging.logger import get_logger
from datachat.logging.tags import LLM

logger = get_logger(__name__)

API_KEY_ENV_VARS = ["DATACHAT_LLM_API_KEY", "LLMFOUNDRY_TOKEN", "OPENAI_API_KEY"]


class CredentialError(DatachatError):
    """Raised when credentials cannot be resolved."""

    pass


def resolve_api_key(config_key: Optional[str] = None) -> str:
    """
    Resolve the API key for the chat endpoint.

    Parameters
    ----------
    config_key:
        Key from configuration. Used first when non-empty.

    Returns
    -------
    str
        Resolved API key.

    Raises
    ------
    CredentialError
        If no API key could be resolved.
    """
    if config_key:
        logger.debug(f"{LLM} Using API key from explicit config")
        return config_key

    for env_name in API_KEY_ENV_VARS:
        value = os.getenv(env_name)
        if value:
            logger.debug(f"{LLM} Using API key from env '{env_name}'")
            return value

    raise CredentialError(
        "LLM API key not found. "
        f"Set one of: {', '.join(API_KEY_ENV_VARS)}, or provide 'llm.api_key' in config."
    )


__all__ = ["CredentialError", "resolve_api_key", "API_KEY_ENV_VARS"]
