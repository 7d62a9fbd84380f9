"""
WebSocket message logging.

Writes straight to stdout; independent of any RequestLogger writer.
"""

import json
import sys
from typing import Any

from request_logger.utils.colors import colors_supported, green


def format_socket_message(message: Any, colors: bool = False) -> str:
    """
    Format a WebSocket message.

    Args:
        message: Text, bytes, or a JSON-serializable structure
        colors: Color the "WS" tag

    Returns:
        "(WS) | <content>" with structures pretty-printed
    """
    if isinstance(message, str):
        content = message
    elif isinstance(message, (bytes, bytearray)):
        content = bytes(message).decode("utf-8", errors="replace")
    else:
        content = json.dumps(message, indent=2, ensure_ascii=False, default=str)

    return f"({green('WS', colors)}) | {content}"


def log_socket_message(message: Any, *, colors: bool | None = None) -> None:
    """Write one WebSocket message line to stdout."""
    if colors is None:
        colors = colors_supported(sys.stdout)
    print(format_socket_message(message, colors), file=sys.stdout, flush=True)
