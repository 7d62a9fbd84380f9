"""
Unit tests for request_logger/utils/colors.py
"""

import io

import pytest
from colorama import Fore

from request_logger.utils.colors import (
    METHOD_COLORS,
    HttpMethod,
    colors_supported,
    get_method_color,
    get_method_string_color,
    green,
    style,
)


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


# ============================================================
# Method color mapping tests
# ============================================================


class TestMethodColors:
    """Tests for method to color mapping."""

    @pytest.mark.parametrize(
        "method,color",
        [
            ("GET", Fore.BLUE),
            ("POST", Fore.GREEN),
            ("PUT", Fore.YELLOW),
            ("DELETE", Fore.RED),
            ("PATCH", Fore.MAGENTA),
            ("OPTIONS", Fore.CYAN),
            ("HEAD", Fore.LIGHTBLACK_EX),
        ],
    )
    def test_known_methods(self, method, color):
        """Each supported method should map to its color."""
        assert get_method_color(method) == color
        assert get_method_string_color(method) == f"{color}{method}{Fore.RESET}"

    def test_every_method_mapped(self):
        """Every HttpMethod member should have a color."""
        assert set(METHOD_COLORS) == set(HttpMethod)

    def test_unknown_method_passthrough(self):
        """Unrecognized methods should be returned unstyled."""
        assert get_method_color("TRACE") is None
        assert get_method_string_color("TRACE") == "TRACE"

    def test_case_sensitive(self):
        """Lowercase tokens are not recognized."""
        assert get_method_string_color("get") == "get"

    def test_disabled_colors(self):
        """Disabled colors should return the raw token."""
        assert get_method_string_color("GET", enabled=False) == "GET"


# ============================================================
# style tests
# ============================================================


class TestStyle:
    """Tests for style helpers."""

    def test_style_wraps(self):
        """Text should be wrapped in color and reset codes."""
        assert style("x", Fore.CYAN) == f"{Fore.CYAN}x{Fore.RESET}"

    def test_style_disabled(self):
        """Disabled styling should be the identity."""
        assert style("x", Fore.CYAN, enabled=False) == "x"

    def test_green(self):
        assert green("WS") == f"{Fore.GREEN}WS{Fore.RESET}"


# ============================================================
# colors_supported tests
# ============================================================


class TestColorsSupported:
    """Tests for colors_supported function."""

    def test_non_tty(self):
        """A plain stream should not get colors."""
        assert colors_supported(io.StringIO()) is False

    def test_tty(self):
        """A terminal should get colors."""
        assert colors_supported(_TtyStream()) is True

    def test_no_color(self, monkeypatch):
        """NO_COLOR should disable colors even on a terminal."""
        monkeypatch.setenv("NO_COLOR", "1")
        assert colors_supported(_TtyStream()) is False

    def test_force_color(self, monkeypatch):
        """FORCE_COLOR should enable colors on any stream."""
        monkeypatch.setenv("FORCE_COLOR", "1")
        monkeypatch.setenv("NO_COLOR", "1")
        assert colors_supported(io.StringIO()) is True
