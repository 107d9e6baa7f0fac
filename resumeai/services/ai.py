# resumeai/services/ai.py
from __future__ import annotations
import logging
from dataclasses import dataclass

import openai

from resumeai.errors import UpstreamRejected, UpstreamUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionParams:
    model: str
    temperature: float
    max_tokens: int


@dataclass(frozen=True)
class Completion:
    text: str
    total_tokens: int


def _provider_message(err: openai.APIStatusError) -> str | None:
    body = err.body
    if isinstance(body, dict):
        inner = body.get("error")
        if isinstance(inner, dict):
            body = inner
        msg = body.get("message")
        if isinstance(msg, str) and msg:
            return msg
    return None


def call_ai(
    client: openai.OpenAI,
    params: CompletionParams,
    system: str,
    prompt: str,
    *,
    fallback_error: str = "Failed to contact OpenAI",
) -> Completion:
    """One chat completion, no retries. Returns the first choice's text and total token usage."""
    logger.debug("completion request: model=%s max_tokens=%d", params.model, params.max_tokens)
    try:
        resp = client.chat.completions.create(
            model=params.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            temperature=params.temperature,
            max_tokens=params.max_tokens,
        )
    except openai.APIStatusError as e:
        logger.warning("completion rejected: status=%s body=%s", e.status_code, e.body)
        raise UpstreamRejected(
            _provider_message(e) or fallback_error, status=e.status_code, body=e.body
        ) from e
    except openai.APIConnectionError as e:
        logger.warning("completion endpoint unreachable: %s", e)
        raise UpstreamUnavailable(str(e) or fallback_error) from e

    choices = getattr(resp, "choices", None) or []
    message = getattr(choices[0], "message", None) if choices else None
    text = (getattr(message, "content", None) or "") if message else ""
    usage = getattr(resp, "usage", None)
    total_tokens = int(getattr(usage, "total_tokens", 0) or 0) if usage else 0
    logger.debug("completion response: %d chars, %d tokens", len(text), total_tokens)
    return Completion(text=text, total_tokens=total_tokens)
