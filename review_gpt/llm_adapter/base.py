"""Abstract base class that all LLM providers must implement."""

from __future__ import annotations

from abc import ABC, abstractmethod

from review_gpt.llm_adapter.errors import InvalidModelError, UpstreamError
from review_gpt.llm_adapter.models import (
    APIResponse,
    ReviewRequest,
    ReviewResult,
    SamplingParameters,
)
from review_gpt.llm_adapter.registry import resolve
from review_gpt.llm_adapter.request_builder import build_request, extract_comments
from review_gpt.llm_adapter.validation import validate


class LLMProvider(ABC):
    """
    Contract for LLM providers.

    Implementations only deliver a request and decode the reply. Model
    resolution, validation, payload shape and comment extraction live here
    so every provider interprets responses the same way.
    """

    @abstractmethod
    async def send(self, request: ReviewRequest) -> APIResponse:
        """Deliver one request and return the decoded response."""

    async def review(
        self,
        diff: str,
        alias: str,
        params: SamplingParameters,
    ) -> ReviewResult:
        descriptor = resolve(alias)
        if descriptor is None:
            raise InvalidModelError(alias)
        validate(params, True, alias)

        request = build_request(descriptor, params, diff)
        response = await self.send(request)

        if response.error is not None:
            err = response.error
            raise UpstreamError(err.message, type=err.type, code=err.code, param=err.param)

        return ReviewResult(
            model=descriptor.api_name,
            comments=extract_comments(response, descriptor),
            usage=response.usage,
        )

    async def request_improvements(
        self,
        diff: str,
        alias: str,
        params: SamplingParameters,
    ) -> list[str]:
        """Convenience wrapper: only the ordered review comments."""
        result = await self.review(diff, alias, params)
        return result.comments
