"""
Middleware Module.

Exports request logging middleware and setup functions.
"""

from request_logger.middleware.logging import (
    RequestLoggingMiddleware,
    create_logger,
    setup_logging,
)

__all__ = [
    "RequestLoggingMiddleware",
    "create_logger",
    "setup_logging",
]
