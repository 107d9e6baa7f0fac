# resumeai/services/responses.py
from __future__ import annotations
import json
from typing import Any, Optional

from resumeai.errors import FunctionError

JSON_HEADERS = {"Content-Type": "application/json"}
TEXT_HEADERS = {"Content-Type": "text/plain; charset=utf-8"}


def json_response(status: int, payload: Any) -> dict:
    return {"statusCode": status, "headers": dict(JSON_HEADERS), "body": json.dumps(payload)}


def text_response(status: int, text: str) -> dict:
    return {"statusCode": status, "headers": dict(TEXT_HEADERS), "body": text}


def error_response(err: FunctionError, debug_log: Optional[list] = None) -> dict:
    payload: dict = {"error": err.message}
    if debug_log is not None:
        payload["debugLog"] = debug_log
    return json_response(err.status_code, payload)


def header(event: dict, name: str) -> Optional[str]:
    """Case-insensitive header lookup on a function event."""
    headers = event.get("headers") or {}
    wanted = name.lower()
    for k, v in headers.items():
        if str(k).lower() == wanted:
            return v
    return None
