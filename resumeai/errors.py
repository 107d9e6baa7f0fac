# resumeai/errors.py
from __future__ import annotations


class FunctionError(Exception):
    """Base for failures a function handler turns into an HTTP response."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MethodNotAllowed(FunctionError):
    status_code = 405
    default_message = "Method Not Allowed"


class Unauthenticated(FunctionError):
    status_code = 401
    default_message = "Unauthorized"


class BadRequest(FunctionError):
    status_code = 400
    default_message = "Bad Request"


class MalformedBody(BadRequest):
    default_message = "Invalid request body"


class MissingField(BadRequest):
    pass


class ConfigurationError(FunctionError):
    default_message = "OpenAI API key not configured"


class UpstreamError(FunctionError):
    default_message = "Completion request failed"


class UpstreamUnavailable(UpstreamError):
    """The completion endpoint could not be reached at all."""


class UpstreamRejected(UpstreamError):
    """The completion endpoint answered with a non-success status."""

    def __init__(self, message: str | None = None, status: int | None = None, body=None):
        super().__init__(message)
        self.status = status
        self.body = body


class InvalidModelOutput(FunctionError):
    default_message = "AI did not return valid JSON."
