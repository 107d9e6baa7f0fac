import httpx
import pytest

from conftest import chat_completion
from resumeai.errors import UpstreamRejected, UpstreamUnavailable
from resumeai.services.ai import CompletionParams, call_ai

PARAMS = CompletionParams(model="gpt-3.5-turbo", temperature=0.6, max_tokens=900)


def test_sends_fixed_parameters_and_two_messages(openai_client, completion_api):
    completion_api.reply("hello", total_tokens=42)
    out = call_ai(openai_client, PARAMS, "system persona", "user prompt")

    assert out.text == "hello"
    assert out.total_tokens == 42
    (sent,) = completion_api.requests
    assert sent["model"] == "gpt-3.5-turbo"
    assert sent["temperature"] == 0.6
    assert sent["max_tokens"] == 900
    assert sent["messages"] == [
        {"role": "system", "content": "system persona"},
        {"role": "user", "content": "user prompt"},
    ]


def test_missing_usage_defaults_to_zero(openai_client, completion_api):
    completion_api.status, completion_api.payload = 200, chat_completion("x", with_usage=False)
    assert call_ai(openai_client, PARAMS, "s", "p").total_tokens == 0


def test_rejection_carries_provider_message(openai_client, completion_api):
    completion_api.fail(429, {"error": {"message": "rate limited"}})
    with pytest.raises(UpstreamRejected) as info:
        call_ai(openai_client, PARAMS, "s", "p")
    assert info.value.message == "rate limited"
    assert info.value.status == 429
    assert info.value.status_code == 500
    # single attempt, no retries
    assert len(completion_api.requests) == 1


def test_rejection_without_message_uses_fallback(openai_client, completion_api):
    completion_api.fail(500, {"oops": True})
    with pytest.raises(UpstreamRejected) as info:
        call_ai(openai_client, PARAMS, "s", "p", fallback_error="Failed to generate career path")
    assert info.value.message == "Failed to generate career path"


def test_transport_failure_is_unavailable(openai_client, completion_api):
    completion_api.exc = httpx.ConnectError("connection refused")
    with pytest.raises(UpstreamUnavailable):
        call_ai(openai_client, PARAMS, "s", "p")
