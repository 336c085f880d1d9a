"""
Provider factory.

Supported providers:

  openai   OpenAI API -- needs OPENAI_KEY (or OPENAI_API_KEY)
  mock     Built-in deterministic mock, no API key needed

Every call builds a fresh provider; nothing is shared between invocations.
"""

from __future__ import annotations

import logging

from review_gpt.llm_adapter.base import LLMProvider
from review_gpt.llm_adapter.mock_provider import MockProvider

logger = logging.getLogger(__name__)

PROVIDERS = ("openai", "mock")


def create_provider(
    provider_name: str = "openai",
    api_key: str = "",
    timeout: float | None = None,
) -> LLMProvider:
    """
    Return a provider for the named backend.

    Args:
        provider_name: ``openai`` or ``mock``.
        api_key:       Required for ``openai``.
        timeout:       Request timeout in seconds, ``None`` for the httpx default.
    """
    name = provider_name.lower()

    if name == "mock":
        provider: LLMProvider = MockProvider()
    elif name == "openai":
        from review_gpt.llm_adapter.openai_provider import OpenAIProvider

        provider = OpenAIProvider(api_key=api_key, timeout=timeout)
    else:
        raise ValueError(
            f"Unknown LLM provider '{provider_name}'. "
            f"Available: {', '.join(PROVIDERS)}"
        )

    logger.debug("LLM provider initialized: %s (timeout=%s)", name, timeout)
    return provider
