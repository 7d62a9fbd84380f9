"""
Request logger for FastAPI / Starlette applications.

Times each request and writes one colorized line per request,
error, and WebSocket upgrade.
"""

from request_logger.logger import (
    BEFORE_TIME_KEY,
    LoggerOptions,
    RequestLogger,
)
from request_logger.middleware import (
    RequestLoggingMiddleware,
    create_logger,
    setup_logging,
)
from request_logger.writers import BaseWriter, ConsoleWriter, LoguruWriter, Writer
from request_logger.ws import format_socket_message, log_socket_message

__all__ = [
    "BEFORE_TIME_KEY",
    "LoggerOptions",
    "RequestLogger",
    "RequestLoggingMiddleware",
    "create_logger",
    "setup_logging",
    "BaseWriter",
    "ConsoleWriter",
    "LoguruWriter",
    "Writer",
    "format_socket_message",
    "log_socket_message",
]
