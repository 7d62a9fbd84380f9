"""
Console Writer.

Writes log lines to standard output.
"""

import sys
from typing import TextIO

from colorama import just_fix_windows_console

from request_logger.writers.base import BaseWriter


class ConsoleWriter(BaseWriter):
    """Write each line to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        """
        Initialize writer.

        Args:
            stream: Target stream, resolved at write time when None
        """
        self._stream = stream
        just_fix_windows_console()

    @property
    def stream(self) -> TextIO:
        # Resolve lazily so a replaced sys.stdout is honored
        return self._stream if self._stream is not None else sys.stdout

    def write(self, message: str) -> None:
        stream = self.stream
        stream.write(f"{message}\n")
        stream.flush()
