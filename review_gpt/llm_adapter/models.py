"""Data models for the LLM adapter layer.

Field names mirror the OpenAI wire format, so ``model_dump_json()`` on a
request produces the exact body the API expects and ``model_validate_json``
on a reply yields an ``APIResponse`` directly.
"""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_name: str
    is_chat: bool


class SamplingParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    max_tokens: int
    best_of: int


def _null_to_empty(value: object) -> object:
    # The API sends null for absent strings; treat it as "".
    return "" if value is None else value


class Message(BaseModel):
    role: str = ""
    content: str = ""

    @field_validator("role", "content", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return _null_to_empty(value)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class CompletionRequest(BaseModel):
    """Legacy single-prompt completion body."""

    path: ClassVar[str] = "completions"

    model: str
    prompt: str
    temperature: float
    max_tokens: int
    top_p: float
    frequency_penalty: float
    presence_penalty: float
    best_of: int


class ChatRequest(BaseModel):
    """Chat completion body. The chat API has no ``prompt`` and no ``best_of``."""

    path: ClassVar[str] = "chat/completions"

    model: str
    messages: list[Message]
    temperature: float
    max_tokens: int
    top_p: float
    frequency_penalty: float
    presence_penalty: float


ReviewRequest = Union[CompletionRequest, ChatRequest]


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class APIError(BaseModel):
    message: str = ""
    type: str = ""
    param: str | None = None
    code: str | None = None

    @field_validator("message", "type", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return _null_to_empty(value)


class Choice(BaseModel):
    text: str = ""
    message: Message | None = None
    index: int = 0

    @field_validator("text", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        return _null_to_empty(value)


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class APIResponse(BaseModel):
    error: APIError | None = None
    id: str = ""
    object: str = ""
    created: int = 0
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)


class ReviewResult(BaseModel):
    model: str
    comments: list[str] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)
