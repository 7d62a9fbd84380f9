"""
Loguru Writer.

Forwards log lines to loguru so they share its sinks and format.
"""

from loguru import logger

from request_logger.writers.base import BaseWriter


class LoguruWriter(BaseWriter):
    """Emit each line as a loguru record."""

    def __init__(self, level: str = "INFO", module: str = "Access"):
        self.level = level
        self._log = logger.bind(module=module)

    def write(self, message: str) -> None:
        self._log.log(self.level, message)
