"""
Configuration for the request logger.
"""

from request_logger.config.settings import LoggerSettings, get_settings

__all__ = ["LoggerSettings", "get_settings"]
