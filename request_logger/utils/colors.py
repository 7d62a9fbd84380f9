"""
Terminal colors for log lines.

GET=blue, POST=green, PUT=yellow, DELETE=red, PATCH=magenta,
OPTIONS=cyan, HEAD=gray
"""

import os
import sys
from enum import Enum
from typing import TextIO

from colorama import Fore


class HttpMethod(str, Enum):
    """HTTP methods with a dedicated color."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"


METHOD_COLORS: dict[HttpMethod, str] = {
    HttpMethod.GET: Fore.BLUE,
    HttpMethod.POST: Fore.GREEN,
    HttpMethod.PUT: Fore.YELLOW,
    HttpMethod.DELETE: Fore.RED,
    HttpMethod.PATCH: Fore.MAGENTA,
    HttpMethod.OPTIONS: Fore.CYAN,
    HttpMethod.HEAD: Fore.LIGHTBLACK_EX,
}


def colors_supported(stream: TextIO | None = None) -> bool:
    """
    Detect whether colored output should be produced.

    FORCE_COLOR wins over NO_COLOR, which wins over the TTY check.

    Args:
        stream: Output stream to inspect (defaults to stdout)

    Returns:
        True if ANSI colors should be used
    """
    if os.environ.get("FORCE_COLOR"):
        return True
    if "NO_COLOR" in os.environ:
        return False

    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def style(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text with a foreground color."""
    if not enabled:
        return text
    return f"{color}{text}{Fore.RESET}"


def green(text: str, enabled: bool = True) -> str:
    return style(text, Fore.GREEN, enabled)


def red(text: str, enabled: bool = True) -> str:
    return style(text, Fore.RED, enabled)


def cyan(text: str, enabled: bool = True) -> str:
    return style(text, Fore.CYAN, enabled)


def get_method_color(method: str) -> str | None:
    """
    Get the color for an HTTP method.

    Args:
        method: Uppercase method token (e.g., "GET")

    Returns:
        colorama color code, or None for unrecognized methods

    Example:
        >>> get_method_color("GET") == Fore.BLUE
        True
        >>> get_method_color("get") is None
        True
    """
    try:
        return METHOD_COLORS[HttpMethod(method)]
    except ValueError:
        return None


def get_method_string_color(method: str, enabled: bool = True) -> str:
    """
    Style an HTTP method with its color.

    Unrecognized methods are returned unchanged.
    """
    color = get_method_color(method)
    if color is None:
        return method
    return style(method, color, enabled)
