"""
Review orchestration: one provider call per diff, with logging and token
accounting around the adapter, which itself neither logs nor counts.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console
from rich.markdown import Markdown

from review_gpt.llm_adapter import LLMProvider, ReviewGPTError, SamplingParameters
from review_gpt.observability.metrics import llm_tokens, reviews

logger = logging.getLogger(__name__)

SERVICE_NAME = "review_gpt"

# Closest pygments match to the dracula terminal theme.
CODE_THEME = "dracula"


async def request_review(
    llm: LLMProvider,
    diff: str,
    model: str,
    params: SamplingParameters,
) -> list[str]:
    """Return the ordered review comments for ``diff``."""
    logger.debug("Requesting for improvements (model=%s, diff=%d chars)", model, len(diff))
    try:
        result = await llm.review(diff, model, params)
    except ReviewGPTError as exc:
        reviews.labels(service=SERVICE_NAME, outcome=type(exc).__name__).inc()
        raise

    logger.debug("Got improvements: %d comment(s) from %s", len(result.comments), result.model)
    reviews.labels(service=SERVICE_NAME, outcome="ok").inc()

    pt = result.usage.prompt_tokens
    ct = result.usage.completion_tokens
    if pt or ct:
        llm_tokens.labels(service=SERVICE_NAME, direction="prompt").inc(pt)
        llm_tokens.labels(service=SERVICE_NAME, direction="completion").inc(ct)

    return result.comments


def render(comments: list[str]) -> str:
    """Join comments as Markdown blocks separated by a blank line."""
    return "\n\n".join(comment.strip("\n") for comment in comments)


def print_review(comments: list[str], stream: TextIO | None = None) -> None:
    """
    Write the review to ``stream`` (stdout by default).

    On a terminal each comment is rendered as styled Markdown; when the
    output is piped or redirected the raw Markdown is written unchanged.
    """
    stream = stream or sys.stdout
    if not stream.isatty():
        print(render(comments), file=stream)
        return

    console = Console(file=stream)
    for comment in comments:
        console.print(Markdown(comment, code_theme=CODE_THEME))
        console.print()
