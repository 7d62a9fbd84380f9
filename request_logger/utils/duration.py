"""
Elapsed-time conversion.

Durations are measured in nanoseconds and rendered in the largest
sensible unit: µs below 1ms, ms below 1s, seconds otherwise.
"""

import time

from loguru import logger

log = logger.bind(module="RequestLogger")

NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_S = 1_000_000_000


def now_ns() -> int:
    """Current monotonic high-resolution time in nanoseconds."""
    return time.perf_counter_ns()


def format_duration(elapsed_ns: int) -> str:
    """
    Format an elapsed time.

    Args:
        elapsed_ns: Elapsed time in nanoseconds

    Returns:
        Formatted duration string

    Example:
        >>> format_duration(999_999)
        '1000.0µs'
        >>> format_duration(3_420_000)
        '3.4ms'
        >>> format_duration(1_500_000_000)
        '1.50s'
    """
    if elapsed_ns < NS_PER_MS:
        return f"{elapsed_ns / NS_PER_US:.1f}µs"
    if elapsed_ns < NS_PER_S:
        return f"{elapsed_ns / NS_PER_MS:.1f}ms"
    return f"{elapsed_ns / NS_PER_S:.2f}s"


def get_converted_duration(before_time: int | None, now: int | None = None) -> str:
    """
    Render the time elapsed since before_time in parentheses.

    Args:
        before_time: perf_counter_ns() value recorded when the request started
        now: End instant (defaults to the current time)

    Returns:
        "(<duration>)", or "" when no start instant was recorded
    """
    if before_time is None:
        log.warning("No start time recorded for request, duration omitted")
        return ""

    end = now if now is not None else now_ns()
    elapsed = max(end - before_time, 0)
    return f"({format_duration(elapsed)})"
