# resumeai/routes/functions.py
from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from resumeai.extensions import get_clients
from resumeai.functions import HANDLERS

functions_bp = Blueprint("functions", __name__)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


def _event_from_request() -> dict:
    return {
        "httpMethod": request.method,
        "path": request.path,
        "headers": dict(request.headers),
        "body": request.get_data(as_text=True),
    }


def _to_flask(result: dict) -> Response:
    resp = Response(result.get("body") or "", status=result.get("statusCode", 200))
    for k, v in (result.get("headers") or {}).items():
        resp.headers[k] = v
    return resp


# Mounted under both the Netlify-style path and a plain /api path
@functions_bp.route("/.netlify/functions/<name>", methods=ALL_METHODS)
@functions_bp.route("/api/<name>", methods=ALL_METHODS)
def invoke(name: str):
    fn = HANDLERS.get(name)
    if fn is None:
        return {"error": "Not Found"}, 404
    current_app.logger.debug("invoke %s %s", request.method, name)
    return _to_flask(fn(_event_from_request(), get_clients(current_app)))
