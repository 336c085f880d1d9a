from review_gpt.llm_adapter.base import LLMProvider
from review_gpt.llm_adapter.errors import (
    DecodeError,
    ParameterError,
    ReviewGPTError,
    SerializationError,
    TransportError,
    UpstreamError,
)
from review_gpt.llm_adapter.factory import create_provider
from review_gpt.llm_adapter.mock_provider import MockProvider
from review_gpt.llm_adapter.models import ReviewResult, SamplingParameters

__all__ = [
    "LLMProvider",
    "MockProvider",
    "ReviewResult",
    "SamplingParameters",
    "create_provider",
    "ReviewGPTError",
    "ParameterError",
    "SerializationError",
    "TransportError",
    "DecodeError",
    "UpstreamError",
]
