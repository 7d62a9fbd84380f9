"""
Base Writer Module.

Defines the output sink interface for formatted log lines.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable


@runtime_checkable
class Writer(Protocol):
    """Anything that accepts one formatted line at a time."""

    def write(self, message: str) -> None: ...


class BaseWriter(ABC):
    """
    Base class for bundled writers.

    Custom sinks do not need to subclass this; any object with a
    ``write(message)`` method is accepted.
    """

    @abstractmethod
    def write(self, message: str) -> None:
        """
        Write one log line.

        Args:
            message: Formatted line without trailing newline
        """
        pass
