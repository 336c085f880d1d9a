"""
Request construction and response interpretation for the two OpenAI API
families.

The legacy completion API takes one prompt string and answers in
``choices[].text``; the chat API takes role-tagged messages and answers in
``choices[].message.content``. Callers pick neither: the resolved
ModelDescriptor decides.
"""

from __future__ import annotations

from pydantic_core import PydanticSerializationError

from review_gpt.llm_adapter.errors import SerializationError
from review_gpt.llm_adapter.models import (
    APIResponse,
    ChatRequest,
    CompletionRequest,
    Message,
    ModelDescriptor,
    ReviewRequest,
    SamplingParameters,
)

API_BASE_URL = "https://api.openai.com/v1/"

PROMPT_PREFIX = (
    "From a code reviewer's perspective, Review the the git diff below and tell me "
    "what I can improve on in the code (the '+' in the git diff is an added line, "
    "the '-' is a removed line). Only review the changes that code that has been "
    "added i.e. the code denoted by the '+' icon all other codes i.e. codes denoted "
    "by '-' and with no indicator, are just for context dont comment on them. Do not "
    "suggest changes already made in the git diff. Do not explain the git diff. Only "
    "say what could be improved. Focus on what needs to be improved rather than what "
    "is already properly implemented. Also go into more detail, give me code snippets "
    "of how to enhance the code giving me code suggestions too. Give the response in "
    "Markdown"
)

CHAT_PROMPT_INSTRUCTIONS = (
    "You are a very intelligentX and professional senior engineer with over 10 ye"
    "ars of experience. You have a deep understanding of software engineering pri"
    "nciples and best practices. You are also proficient in a variety of programm"
    "ing languages and technologies. You are passionate about writing high-qualit"
    "y code and ensuring that our code is well-reviewed. You review only the adde"
    "d changed code in the while code review. You are also committed to continuou"
    "s learning and improvement. When reviewing code, You  typically look for the"
    " following: Correctness: Does the code work as intended? Readability: Is the"
    " code easy to read and understand? Maintainability: Is the code easy to main"
    "tain and extend? Performance: Is the code efficient and performant? Security"
    ": Is the code secure and free from vulnerabilities? You provide code reviewe"
    "rs  with specific feedback and suggestions for improvement the cod You will "
    "take in a git diff, and review it for the user. You will provide user with d"
    "etailed code review feedback, including the following: File name under 'File"
    " Name' section, Line number under 'Line Number' section, Comment under 'Comm"
    "ent' section, Sugegested Refactored code snippet for code that needs refacto"
    "ring under 'Suggested Change' section. Please also try to provide the user w"
    "ith specific suggestions for improvement, such as: How to make the code more"
    " readable, How to improve the performance of the code, How to make the code "
    "more secure, How to improve the overall design of the code. The user appreci"
    "ates your feedback and the user will use it to improve their code."
)


def build_request(
    descriptor: ModelDescriptor,
    params: SamplingParameters,
    diff: str,
) -> ReviewRequest:
    """Build the request body for the descriptor's API family."""
    if descriptor.is_chat:
        return ChatRequest(
            model=descriptor.api_name,
            messages=[
                Message(role="system", content=CHAT_PROMPT_INSTRUCTIONS),
                Message(role="user", content=diff),
            ],
            temperature=params.temperature,
            max_tokens=params.max_tokens,
            top_p=params.top_p,
            frequency_penalty=params.frequency_penalty,
            presence_penalty=params.presence_penalty,
        )

    return CompletionRequest(
        model=descriptor.api_name,
        prompt=f"{PROMPT_PREFIX}\n{diff}\n",
        temperature=params.temperature,
        max_tokens=params.max_tokens,
        top_p=params.top_p,
        frequency_penalty=params.frequency_penalty,
        presence_penalty=params.presence_penalty,
        best_of=params.best_of,
    )


def serialize_request(request: ReviewRequest) -> bytes:
    try:
        return request.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, UnicodeEncodeError) as exc:
        raise SerializationError(f"Error creating request body: {exc}") from exc


def endpoint_url(request: ReviewRequest, base_url: str = API_BASE_URL) -> str:
    """``{base_url}/completions`` or ``{base_url}/chat/completions``."""
    return f"{base_url.rstrip('/')}/{request.path}"


def extract_comments(response: APIResponse, descriptor: ModelDescriptor) -> list[str]:
    """
    Flatten the response choices into review comments, in response order.

    Chat choices are taken as-is (even when empty); legacy choices with
    empty text are skipped.
    """
    comments: list[str] = []
    for choice in response.choices:
        if descriptor.is_chat:
            comments.append(choice.message.content if choice.message else "")
            continue
        if choice.text:
            comments.append(choice.text)
    return comments
