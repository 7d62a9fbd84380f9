"""
Utility modules for the request logger.
"""

from request_logger.utils.colors import (
    METHOD_COLORS,
    HttpMethod,
    colors_supported,
    cyan,
    get_method_color,
    get_method_string_color,
    green,
    red,
    style,
)
from request_logger.utils.duration import (
    format_duration,
    get_converted_duration,
    now_ns,
)
from request_logger.utils.log import InterceptHandler, configure_logging
from request_logger.utils.payload import ApiResponse, ErrorInfo

__all__ = [
    # Colors
    "METHOD_COLORS",
    "HttpMethod",
    "colors_supported",
    "style",
    "green",
    "red",
    "cyan",
    "get_method_color",
    "get_method_string_color",
    # Duration
    "format_duration",
    "get_converted_duration",
    "now_ns",
    # Logging
    "InterceptHandler",
    "configure_logging",
    # Payloads
    "ApiResponse",
    "ErrorInfo",
]
