# resumeai/functions/parse_resume.py
"""
parseResume: free-form resume text -> ResumeData object.

Unlike the other functions, every non-200 JSON body carries a `debugLog`
trail of {step, ...} entries so the builder UI can show what went wrong.
"""
from __future__ import annotations
import json
import logging

from resumeai.errors import (
    ConfigurationError, FunctionError, InvalidModelOutput, Unauthenticated, UpstreamRejected,
)
from resumeai.services.ai import CompletionParams, call_ai
from resumeai.services.extraction import delimited_span, extract_json_object
from resumeai.services.prompts import RESUME_PARSE_SYSTEM, build_resume_parse_prompt
from resumeai.services.responses import error_response, header, json_response, text_response
from resumeai.services.validation import parse_resume_request

logger = logging.getLogger(__name__)

COMPLETION = CompletionParams(model="gpt-3.5-turbo-16k", temperature=0.3, max_tokens=2000)
FALLBACK_ERROR = "Failed to contact OpenAI"


def handler(event: dict, clients) -> dict:
    if event.get("httpMethod") != "POST":
        return text_response(405, "Method Not Allowed")

    debug_log: list = []
    try:
        principal = clients.verifier.verify(header(event, "Authorization"))
        if not principal:
            raise Unauthenticated()

        # a body that is not JSON falls through to the generic 500 below
        body = json.loads(event.get("body"))
        text = body.get("text") if isinstance(body, dict) else None
        debug_log.append({"step": "Received text", "text": text})
        req = parse_resume_request(body)

        prompt = build_resume_parse_prompt(req.text)
        debug_log.append({"step": "Prompt", "prompt": prompt})

        if clients.openai is None:
            raise ConfigurationError()

        try:
            completion = call_ai(
                clients.openai, COMPLETION, RESUME_PARSE_SYSTEM, prompt,
                fallback_error=FALLBACK_ERROR,
            )
        except UpstreamRejected as e:
            debug_log.append({"step": "OpenAI API error", "error": e.body})
            raise
        debug_log.append({
            "step": "OpenAI API response",
            "data": {"total_tokens": completion.total_tokens, "length": len(completion.text)},
        })
        debug_log.append({"step": "AI Response", "aiResponse": completion.text})
        debug_log.append({
            "step": "Extracted JSON string",
            "jsonString": delimited_span(completion.text, "{", "}") or "",
        })

        try:
            resume = extract_json_object(completion.text)
        except InvalidModelOutput as e:
            cause = e.__cause__
            debug_log.append({"step": "JSON parse error", "error": str(cause) if cause else e.message})
            raise
    except FunctionError as e:
        logger.warning("parseResume failed (%s): %s", e.status_code, e.message)
        return error_response(e, debug_log)
    except Exception as e:
        logger.exception("parseResume: unhandled error")
        debug_log.append({"step": "General error", "error": str(e)})
        return error_response(FunctionError(str(e) or FALLBACK_ERROR), debug_log)

    clients.usage.record(principal, completion.total_tokens)
    return json_response(200, {**resume, "total_tokens": completion.total_tokens})
