# resumeai/services/validation.py
"""
Request body parsing. Each parser turns raw body text into a typed request
object or raises a BadRequest subclass describing what is wrong.
"""
from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Optional

from resumeai.errors import MalformedBody, MissingField


@dataclass(frozen=True)
class CareerPathRequest:
    profession: str


@dataclass(frozen=True)
class ParseResumeRequest:
    text: str


@dataclass(frozen=True)
class SuggestionRequest:
    prompt: str
    profession: str = ""
    summary: str = ""
    section: str = ""


def load_body(raw: Optional[str]) -> Any:
    """json.loads with every failure folded into MalformedBody."""
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedBody() from e


def _nonblank_str(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def parse_career_path_request(raw: Optional[str]) -> CareerPathRequest:
    body = load_body(raw)
    profession = body.get("profession") if isinstance(body, dict) else None
    if not _nonblank_str(profession):
        raise MissingField("No profession provided.")
    return CareerPathRequest(profession=profession)


def parse_resume_request(body: Any) -> ParseResumeRequest:
    """
    Takes an already-decoded body. Only falsy values are rejected; no trim,
    no type check (kept compatible with existing clients).
    """
    text = body.get("text") if isinstance(body, dict) else None
    if not text:
        raise MissingField("No resume text provided.")
    return ParseResumeRequest(text=text if isinstance(text, str) else json.dumps(text))


def parse_suggestion_request(raw: Optional[str]) -> SuggestionRequest:
    body = load_body(raw)
    if not isinstance(body, dict):
        body = {}
    prompt = body.get("prompt")
    if not _nonblank_str(prompt):
        raise MissingField("No prompt provided.")

    def _str(key: str) -> str:
        v = body.get(key) or ""
        return v if isinstance(v, str) else str(v)

    profession, section = _str("profession"), _str("section")
    if section == "personal" and not profession.strip():
        raise MissingField("Please provide a job title in the personal information section.")
    return SuggestionRequest(
        prompt=prompt,
        profession=profession,
        summary=_str("summary"),
        section=section,
    )
