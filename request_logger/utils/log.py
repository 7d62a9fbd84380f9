"""
Loguru configuration.

Routes the logger's own diagnostics and, optionally, uvicorn's
standard-library loggers through loguru.
"""

import logging
import sys
from typing import Any

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]: <14}</cyan> | <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(
    level: str = "INFO",
    sink: Any = None,
    intercept: tuple[str, ...] = ("uvicorn", "uvicorn.access", "uvicorn.error"),
) -> int:
    """
    Configure loguru with the default format.

    Args:
        level: Minimum level for the sink
        sink: Loguru sink (defaults to stderr)
        intercept: Standard-library logger names to redirect to loguru

    Returns:
        Handler id of the added sink
    """
    logger.configure(extra={"module": "Server"})
    logger.remove()
    handler_id = logger.add(
        sink if sink is not None else sys.stderr,
        format=LOG_FORMAT,
        level=level,
    )

    for name in intercept:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    return handler_id
