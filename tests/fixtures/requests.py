"""
Request and writer fixtures for logger tests.
"""

import pytest
from loguru import logger
from starlette.requests import HTTPConnection, Request


class CaptureWriter:
    """Writer that keeps every line in memory."""

    def __init__(self):
        self.lines: list[str] = []

    def write(self, message: str) -> None:
        self.lines.append(message)


def build_request(
    method: str = "GET",
    path: str = "/test-path",
    headers: dict[str, str] | None = None,
    scope_type: str = "http",
) -> HTTPConnection:
    """Build a bare Starlette connection for calling hooks directly."""
    raw_headers = [(b"host", b"localhost")]
    for name, value in (headers or {}).items():
        raw_headers.append((name.lower().encode(), value.encode()))

    scope = {
        "type": scope_type,
        "scheme": "http" if scope_type == "http" else "ws",
        "server": ("localhost", 80),
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": raw_headers,
    }
    if scope_type == "http":
        scope["method"] = method
        return Request(scope)
    return HTTPConnection(scope)


@pytest.fixture
def capture_writer() -> CaptureWriter:
    """In-memory writer."""
    return CaptureWriter()


@pytest.fixture
def make_request():
    """Factory for bare requests."""
    return build_request


@pytest.fixture
def store() -> dict:
    """Empty per-request store."""
    return {}


@pytest.fixture
def loguru_messages():
    """Collect loguru output for the duration of a test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def fixed_clock(monkeypatch):
    """
    Freeze the duration clock.

    Returns a setter; the clock starts at 3.42ms.
    """
    current = {"now": 3_420_000}
    monkeypatch.setattr(
        "request_logger.utils.duration.now_ns", lambda: current["now"]
    )

    def set_now(value: int) -> None:
        current["now"] = value

    return set_now
