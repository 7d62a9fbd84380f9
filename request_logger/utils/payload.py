"""
Response and error views used by the request logger.

Both are read-only snapshots; a field is None when the underlying
response or exception does not expose it.
"""

import json
from dataclasses import dataclass
from typing import Any

from starlette.exceptions import HTTPException as StarletteHTTPException


def _as_status(value: Any) -> int | None:
    # bool is an int subclass but {"status": true} is not an HTTP status
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


@dataclass(frozen=True)
class ApiResponse:
    """What the logger reads from a handled response."""

    status: int | None = None
    message: str | None = None

    @classmethod
    def from_payload(cls, payload: Any, status: int | None = None) -> "ApiResponse":
        """
        Build from a decoded response payload.

        Args:
            payload: Decoded body (only dicts carry a message)
            status: HTTP status code sent with the payload

        Returns:
            ApiResponse with the non-empty string message, if any
        """
        message = None
        if isinstance(payload, dict):
            value = payload.get("message")
            if isinstance(value, str) and value:
                message = value
        return cls(status=_as_status(status), message=message)

    @classmethod
    def from_body(cls, body: bytes, status: int | None = None) -> "ApiResponse":
        """Build from a raw JSON body; undecodable bodies carry no message."""
        if not body:
            return cls(status=_as_status(status))
        try:
            payload = json.loads(body)
        except (UnicodeDecodeError, ValueError, RecursionError):
            return cls(status=_as_status(status))
        return cls.from_payload(payload, status)


@dataclass(frozen=True)
class ErrorInfo:
    """What the logger reads from a raised exception."""

    status: int | None
    message: str

    @classmethod
    def from_exception(cls, error: BaseException) -> "ErrorInfo":
        """
        Build from an exception.

        HTTPException exposes status_code and detail; other exceptions
        may carry an integer ``status`` or ``status_code`` attribute.
        """
        if isinstance(error, StarletteHTTPException):
            return cls(status=error.status_code, message=str(error.detail))

        status = _as_status(getattr(error, "status", None))
        if status is None:
            status = _as_status(getattr(error, "status_code", None))
        return cls(status=status, message=str(error))
