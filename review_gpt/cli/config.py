from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILE = ".rgpt.env"

WRONG_KEY_HINT = (
    "The API key you entered is either wrong or hasn't been set up with a paid "
    "account. You must sign up for a paid account at OpenAI."
)


def env_file_path() -> Path:
    return Path.home() / ENV_FILE


def load_env_file(path: Path | None = None) -> bool:
    """Load ``~/.rgpt.env`` without overriding variables already set."""
    path = path or env_file_path()
    if not path.is_file():
        logger.warning(
            "Env file not found at %s. Did you follow the installation instructions?",
            path,
        )
        return False
    return load_dotenv(path, override=False)


def _optional_float(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from exc


@dataclass(frozen=True)
class ReviewConfig:
    openai_key: str
    llm_provider: str
    request_timeout: float | None
    metrics_file: str | None

    @classmethod
    def from_env(cls) -> ReviewConfig:
        return cls(
            openai_key=(
                os.environ.get("OPENAI_KEY", "")
                or os.environ.get("OPENAI_API_KEY", "")
            ),
            llm_provider=os.environ.get("REVIEW_GPT_PROVIDER", "openai").lower(),
            request_timeout=_optional_float("REVIEW_GPT_TIMEOUT"),
            metrics_file=os.environ.get("REVIEW_GPT_METRICS_FILE") or None,
        )
