"""
Deterministic mock LLM provider for testing and development.

Always returns the same review for the same diff, so the whole CLI can run
without network access or an API key.
"""

from __future__ import annotations

import hashlib

from review_gpt.llm_adapter.base import LLMProvider
from review_gpt.llm_adapter.models import (
    APIResponse,
    ChatRequest,
    Choice,
    Message,
    ReviewRequest,
    Usage,
)

_MOCK_PREFIX = "[MOCK] "


class MockProvider(LLMProvider):

    async def send(self, request: ReviewRequest) -> APIResponse:
        if isinstance(request, ChatRequest):
            prompt = "\n".join(m.content for m in request.messages)
            diff = request.messages[-1].content
        else:
            prompt = request.prompt
            diff = request.prompt

        diff_hash = hashlib.sha256(diff.encode()).hexdigest()
        content = (
            f"{_MOCK_PREFIX}Deterministic review for diff hash "
            f"{diff_hash[:12]} using {request.model}."
        )

        if isinstance(request, ChatRequest):
            choice = Choice(message=Message(role="assistant", content=content))
            obj = "chat.completion"
        else:
            choice = Choice(text=content)
            obj = "text_completion"

        fake_prompt_tokens = len(prompt.split())
        fake_completion_tokens = len(content.split())

        return APIResponse(
            id=f"mock-{diff_hash[:24]}",
            object=obj,
            choices=[choice],
            usage=Usage(
                prompt_tokens=fake_prompt_tokens,
                completion_tokens=fake_completion_tokens,
                total_tokens=fake_prompt_tokens + fake_completion_tokens,
            ),
        )
