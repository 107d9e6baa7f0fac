# resumeai/functions/resume_suggestions.py
"""generateResume: bullet-point suggestions for one resume section."""
from __future__ import annotations
import logging

from resumeai.errors import ConfigurationError, FunctionError, MethodNotAllowed, Unauthenticated
from resumeai.services.ai import CompletionParams, call_ai
from resumeai.services.prompts import SUGGESTIONS_SYSTEM
from resumeai.services.responses import error_response, header, json_response
from resumeai.services.validation import parse_suggestion_request

logger = logging.getLogger(__name__)

COMPLETION = CompletionParams(model="gpt-3.5-turbo", temperature=0.7, max_tokens=500)
FALLBACK_ERROR = "Failed to generate suggestions"


def handler(event: dict, clients) -> dict:
    if event.get("httpMethod") != "POST":
        return error_response(MethodNotAllowed())

    try:
        principal = clients.verifier.verify(header(event, "Authorization"))
        if not principal:
            raise Unauthenticated()

        req = parse_suggestion_request(event.get("body"))
        if clients.openai is None:
            raise ConfigurationError()

        logger.debug("suggestions: section=%r profession=%r", req.section, req.profession)
        completion = call_ai(
            clients.openai, COMPLETION, SUGGESTIONS_SYSTEM, req.prompt,
            fallback_error=FALLBACK_ERROR,
        )
    except FunctionError as e:
        logger.warning("generateResume failed (%s): %s", e.status_code, e.message)
        return error_response(e)
    except Exception as e:
        logger.exception("generateResume: unhandled error")
        return error_response(FunctionError(str(e) or FALLBACK_ERROR))

    clients.usage.record(principal, completion.total_tokens)
    return json_response(200, {"content": completion.text, "total_tokens": completion.total_tokens})
