"""
Request Logger.

Times each request and writes one colorized line per request:

    [ip] (status) METHOD /path (duration) | message

Errors get their own line and WebSocket upgrades a single
"connection opened" line.
"""

from collections.abc import MutableMapping
from typing import Any, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict
from starlette.requests import HTTPConnection

from request_logger.config import LoggerSettings, get_settings
from request_logger.utils.colors import (
    colors_supported,
    cyan,
    get_method_string_color,
    green,
    red,
)
from request_logger.utils.duration import get_converted_duration, now_ns
from request_logger.utils.payload import ApiResponse, ErrorInfo
from request_logger.writers import ConsoleWriter, LoguruWriter, Writer

log = logger.bind(module="RequestLogger")

# Per-request store keys
BEFORE_TIME_KEY = "before_time"
LOGGED_KEY = "request_logger_logged"


class LoggerOptions(BaseModel):
    """Options accepted by RequestLogger and create_logger."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    log_ip: bool = False
    writer: Optional[Writer] = None
    colors: Optional[bool] = None
    max_body_bytes: int = 65536

    @classmethod
    def from_settings(cls, settings: LoggerSettings | None = None) -> "LoggerOptions":
        """Build options from environment settings."""
        settings = settings or get_settings()
        writer: Writer = (
            LoguruWriter() if settings.writer == "loguru" else ConsoleWriter()
        )
        return cls(
            log_ip=settings.log_ip,
            writer=writer,
            colors=settings.colors,
            max_body_bytes=settings.max_body_bytes,
        )


def is_websocket_upgrade(request: HTTPConnection) -> bool:
    """Check whether the connection is a WebSocket upgrade."""
    if request.scope.get("type") == "websocket":
        return True
    return request.headers.get("upgrade") == "websocket"


class RequestLogger:
    """
    Lifecycle hooks that time requests and write log lines.

    The host calls on_request and on_before_handle when a request
    arrives, then either on_after_handle or on_error. Timing state
    lives in the per-request store, so one instance serves any
    number of concurrent requests.
    """

    def __init__(self, options: LoggerOptions | None = None):
        """
        Initialize logger.

        Args:
            options: Logger options (defaults to LoggerOptions())
        """
        self.options = options or LoggerOptions()
        self.writer: Writer = self.options.writer or ConsoleWriter()
        self.colors = (
            self.options.colors
            if self.options.colors is not None
            else colors_supported()
        )

    @property
    def log_ip(self) -> bool:
        return self.options.log_ip

    # ============================================================
    # Hooks
    # ============================================================

    def on_request(self, store: MutableMapping[str, Any]) -> None:
        """Record the instant the request arrived."""
        store[BEFORE_TIME_KEY] = now_ns()

    def on_before_handle(self, store: MutableMapping[str, Any]) -> None:
        """Re-record the start instant right before the handler runs."""
        store[BEFORE_TIME_KEY] = now_ns()

    def on_after_handle(
        self,
        request: HTTPConnection,
        store: MutableMapping[str, Any],
        response: ApiResponse | None = None,
    ) -> None:
        """Write the line for a handled request or opened WebSocket, once per request."""
        if store.get(LOGGED_KEY):
            return

        store[LOGGED_KEY] = True

        if is_websocket_upgrade(request):
            self._write(self.format_websocket_open(request))
            return

        self._write(self.format_after_handle(request, store, response))

    def on_error(
        self,
        request: HTTPConnection,
        store: MutableMapping[str, Any],
        error: BaseException,
    ) -> None:
        """Write the line for a failed request, once per request."""
        if store.get(LOGGED_KEY):
            return

        store[LOGGED_KEY] = True
        self._write(self.format_error(request, store, ErrorInfo.from_exception(error)))

    # ============================================================
    # Formatting
    # ============================================================

    def format_websocket_open(self, request: HTTPConnection) -> str:
        return f"({green('WS', self.colors)}) {request.url.path} | Websocket connection opened"

    def format_after_handle(
        self,
        request: HTTPConnection,
        store: MutableMapping[str, Any],
        response: ApiResponse | None = None,
    ) -> str:
        """
        Build the line for a handled request.

        Args:
            request: Incoming request
            store: Per-request store holding the start instant
            response: Status and message of the response

        Returns:
            Formatted log line
        """
        response = response or ApiResponse()
        segments: list[str] = []

        if self.log_ip:
            forwarded_for = request.headers.get("x-forwarded-for")
            if forwarded_for:
                segments.append(f"[{cyan(forwarded_for, self.colors)}]")

        segments.append(
            f"({green(str(response.status), self.colors)})"
            if response.status is not None
            else ""
        )
        segments.append(get_method_string_color(_method(request), self.colors))
        segments.append(request.url.path)
        segments.append(get_converted_duration(store.get(BEFORE_TIME_KEY)))
        segments.append(f"| {response.message}" if response.message else "")

        return " ".join(segments)

    def format_error(
        self,
        request: HTTPConnection,
        store: MutableMapping[str, Any],
        error: ErrorInfo,
    ) -> str:
        """
        Build the line for a failed request.

        Args:
            request: Incoming request
            store: Per-request store holding the start instant
            error: Status and message of the raised exception

        Returns:
            Formatted log line
        """
        segments: list[str] = [
            red(get_method_string_color(_method(request), self.colors), self.colors),
            request.url.path,
            red("Error", self.colors),
        ]

        if error.status is not None:
            segments.append(str(error.status))

        segments.append(
            f"| Status: {red(str(error.status), self.colors)}"
            if error.status is not None
            else ""
        )
        segments.append(error.message)
        segments.append(get_converted_duration(store.get(BEFORE_TIME_KEY)))

        return " ".join(segments)

    def _write(self, line: str) -> None:
        try:
            self.writer.write(line)
        except Exception as e:
            log.error(f"Failed to write request log line: {e}")


def _method(request: HTTPConnection) -> str:
    # WebSocket scopes carry no method; the handshake is a GET
    return request.scope.get("method", "GET")
