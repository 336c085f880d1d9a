"""
OpenAI HTTP provider.

Speaks both the legacy ``/completions`` and the ``/chat/completions``
endpoints with a plain httpx POST. One attempt per call: no retries, and no
timeout beyond the httpx default unless one is passed in explicitly.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from review_gpt.llm_adapter.base import LLMProvider
from review_gpt.llm_adapter.errors import DecodeError, TransportError
from review_gpt.llm_adapter.models import APIResponse, ReviewRequest
from review_gpt.llm_adapter.request_builder import (
    API_BASE_URL,
    endpoint_url,
    serialize_request,
)


class OpenAIProvider(LLMProvider):
    """
    OpenAI completions adapter.

    Args:
        api_key:   Sent as ``Authorization: Bearer <key>``.
        base_url:  API root, ``https://api.openai.com/v1/`` by default.
        timeout:   Seconds; ``None`` keeps the httpx default.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError(
                "An API key is required for the OpenAI provider. "
                "Set OPENAI_KEY in ~/.rgpt.env or in your environment."
            )
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    async def send(self, request: ReviewRequest) -> APIResponse:
        body = serialize_request(request)
        url = endpoint_url(request, self._base_url)
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(**self._client_kwargs()) as client:
                resp = await client.post(url, content=body, headers=headers)
                raw = resp.content
        except httpx.HTTPError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        try:
            return APIResponse.model_validate_json(raw)
        except ValidationError as exc:
            raise DecodeError(
                f"Could not decode response from {url} "
                f"(HTTP {resp.status_code}): {exc}"
            ) from exc
