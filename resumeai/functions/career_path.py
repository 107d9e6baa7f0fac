# resumeai/functions/career_path.py
"""generateCareerPath: profession -> branching career roadmap (JSON array of steps)."""
from __future__ import annotations
import logging

from resumeai.errors import ConfigurationError, FunctionError, MethodNotAllowed, Unauthenticated
from resumeai.services.ai import CompletionParams, call_ai
from resumeai.services.extraction import extract_json_array
from resumeai.services.prompts import CAREER_PATH_SYSTEM, build_career_path_prompt
from resumeai.services.responses import error_response, header, json_response
from resumeai.services.validation import parse_career_path_request

logger = logging.getLogger(__name__)

COMPLETION = CompletionParams(model="gpt-3.5-turbo", temperature=0.6, max_tokens=900)
FALLBACK_ERROR = "Failed to generate career path"


def _log_steps(steps: list) -> None:
    for idx, step in enumerate(steps, start=1):
        if not isinstance(step, dict):
            logger.debug("step %d: %r", idx, step)
            continue
        logger.debug(
            "step %d: id=%s title=%s prerequisiteIds=%s childrenIds=%s",
            idx, step.get("id"), step.get("title"),
            step.get("prerequisiteIds"), step.get("childrenIds"),
        )
    root = next(
        (
            s for s in steps
            if isinstance(s, dict)
            and isinstance(s.get("prerequisiteIds"), list)
            and not s["prerequisiteIds"]
        ),
        None,
    )
    if root:
        logger.info("career path root step: id=%s title=%s", root.get("id"), root.get("title"))


def handler(event: dict, clients) -> dict:
    if event.get("httpMethod") != "POST":
        return error_response(MethodNotAllowed())

    try:
        principal = clients.verifier.verify(header(event, "Authorization"))
        if not principal:
            raise Unauthenticated()

        req = parse_career_path_request(event.get("body"))
        if clients.openai is None:
            raise ConfigurationError()

        completion = call_ai(
            clients.openai,
            COMPLETION,
            CAREER_PATH_SYSTEM,
            build_career_path_prompt(req.profession),
            fallback_error=FALLBACK_ERROR,
        )
        steps = extract_json_array(completion.text)
        _log_steps(steps)
    except FunctionError as e:
        logger.warning("generateCareerPath failed (%s): %s", e.status_code, e.message)
        return error_response(e)
    except Exception as e:
        logger.exception("generateCareerPath: unhandled error")
        return error_response(FunctionError(str(e) or FALLBACK_ERROR))

    clients.usage.record(principal, completion.total_tokens)
    return json_response(200, {"steps": steps, "total_tokens": completion.total_tokens})
