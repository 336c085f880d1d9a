import json
import logging
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from review_gpt.llm_adapter.models import SamplingParameters
from review_gpt.llm_adapter.openai_provider import OpenAIProvider

SAMPLE_DIFF = """diff --git a/app.py b/app.py
index 83db48f..bf269f4 100644
--- a/app.py
+++ b/app.py
@@ -1,3 +1,4 @@
 import os
+password = "hunter2"
 def main():
-    pass
+    print(os.environ["HOME"])
"""


@pytest.fixture
def sample_diff() -> str:
    return SAMPLE_DIFF


@pytest.fixture
def params() -> SamplingParameters:
    return SamplingParameters(
        temperature=0.5,
        top_p=1.0,
        frequency_penalty=0.0,
        presence_penalty=0.0,
        max_tokens=256,
        best_of=1,
    )


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays one reply."""

    def __init__(self, reply: Callable[[httpx.Request], httpx.Response]) -> None:
        self._reply = reply
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._reply(request)

    @property
    def last_json(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_provider() -> Callable[..., tuple[OpenAIProvider, RecordingHandler]]:
    def _make(reply: Callable[[httpx.Request], httpx.Response]):
        handler = RecordingHandler(reply)
        provider = OpenAIProvider(
            api_key="sk-test",
            transport=httpx.MockTransport(handler),
        )
        return provider, handler

    return _make


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)
