"""review-gpt: code review of git diffs through the OpenAI completion APIs."""

__version__ = "0.4.0"
