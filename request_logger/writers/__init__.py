"""
Output sinks for formatted log lines.
"""

from request_logger.writers.base import BaseWriter, Writer
from request_logger.writers.console import ConsoleWriter
from request_logger.writers.loguru_writer import LoguruWriter

__all__ = [
    "BaseWriter",
    "Writer",
    "ConsoleWriter",
    "LoguruWriter",
]
