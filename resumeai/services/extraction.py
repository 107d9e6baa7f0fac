# resumeai/services/extraction.py
"""
Carve a JSON literal out of free-form model output.

The heuristic is deliberately simple: take everything from the FIRST opening
delimiter to the LAST closing delimiter and parse it. It assumes the model
returned at most one JSON literal, optionally wrapped in prose or a markdown
fence. Trailing commentary that itself contains a closing delimiter will be
swept into the candidate and make the parse fail.
"""
from __future__ import annotations
import json
from typing import Any, Optional

from resumeai.errors import InvalidModelOutput


def delimited_span(text: str, opening: str, closing: str) -> Optional[str]:
    """Substring from the first `opening` to the last `closing`, inclusive."""
    start = text.find(opening)
    end = text.rfind(closing)
    if start == -1 or end == -1:
        return None
    return text[start : end + 1]


def _reject_constant(name: str):
    # NaN / Infinity / -Infinity are not JSON
    raise ValueError(f"invalid JSON constant: {name}")


def extract_delimited(text: str, opening: str, closing: str) -> Any:
    candidate = delimited_span(text or "", opening, closing)
    if candidate is None:
        raise InvalidModelOutput()
    try:
        return json.loads(candidate, parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidModelOutput() from e


def extract_json_array(text: str) -> list:
    return extract_delimited(text, "[", "]")


def extract_json_object(text: str) -> dict:
    return extract_delimited(text, "{", "}")
