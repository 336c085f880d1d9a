"""
Static registry of supported models, keyed by the short alias users type.

The mapping is read-only for the life of the process. Lookups are exact and
case-sensitive; an unknown alias yields ``None`` rather than a placeholder
descriptor.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from review_gpt.llm_adapter.models import ModelDescriptor

TURBO = ModelDescriptor(api_name="gpt-3.5-turbo", is_chat=True)
GPT4 = ModelDescriptor(api_name="gpt-4", is_chat=True)
DAVINCI = ModelDescriptor(api_name="text-davinci-003", is_chat=False)
CURIE = ModelDescriptor(api_name="text-curie-001", is_chat=False)
BABBAGE = ModelDescriptor(api_name="text-babbage-001", is_chat=False)
ADA = ModelDescriptor(api_name="text-ada-001", is_chat=False)

MODELS: Mapping[str, ModelDescriptor] = MappingProxyType(
    {
        "turbo": TURBO,
        "gpt4": GPT4,
        "davinci": DAVINCI,
        "curie": CURIE,
        "babbage": BABBAGE,
        "ada": ADA,
    }
)


def resolve(alias: str) -> Optional[ModelDescriptor]:
    """Look up a model by alias."""
    return MODELS.get(alias)


def available_aliases() -> list[str]:
    return sorted(MODELS)
