import pytest

from review_gpt.llm_adapter.errors import InvalidModelError
from review_gpt.llm_adapter.factory import create_provider
from review_gpt.llm_adapter.mock_provider import MockProvider
from review_gpt.llm_adapter.models import SamplingParameters
from review_gpt.llm_adapter.openai_provider import OpenAIProvider


@pytest.mark.asyncio
async def test_mock_is_deterministic(params, sample_diff):
    llm = MockProvider()

    first = await llm.review(sample_diff, "turbo", params)
    second = await llm.review(sample_diff, "turbo", params)

    assert first == second
    assert len(first.comments) == 1
    assert first.comments[0].startswith("[MOCK] ")
    assert "gpt-3.5-turbo" in first.comments[0]
    assert first.usage.total_tokens == first.usage.prompt_tokens + first.usage.completion_tokens


@pytest.mark.asyncio
async def test_mock_answers_legacy_models_with_text(params, sample_diff):
    comments = await MockProvider().request_improvements(sample_diff, "ada", params)

    assert len(comments) == 1
    assert "text-ada-001" in comments[0]


@pytest.mark.asyncio
async def test_mock_reviews_differ_per_diff(params):
    llm = MockProvider()

    a = await llm.request_improvements("+a = 1\n", "turbo", params)
    b = await llm.request_improvements("+b = 2\n", "turbo", params)

    assert a != b


def test_factory_builds_each_provider():
    assert isinstance(create_provider("mock"), MockProvider)
    assert isinstance(create_provider("OpenAI", api_key="sk-test"), OpenAIProvider)


def test_factory_returns_fresh_instances():
    assert create_provider("mock") is not create_provider("mock")


def test_factory_rejects_unknown_provider():
    with pytest.raises(ValueError, match="Unknown LLM provider"):
        create_provider("anthropic")


def test_factory_openai_needs_key():
    with pytest.raises(ValueError, match="API key"):
        create_provider("openai", api_key="")


@pytest.mark.asyncio
async def test_unknown_model_rejected_before_parameter_checks():
    bad = SamplingParameters(
        temperature=9.0,
        top_p=9.0,
        frequency_penalty=9.0,
        presence_penalty=9.0,
        max_tokens=1,
        best_of=0,
    )

    with pytest.raises(InvalidModelError) as exc_info:
        await MockProvider().review("+x\n", "gpt-5", bad)
    assert exc_info.value.alias == "gpt-5"
