"""Tests for elza.utils.console module."""

from unittest.mock import patch

from elza import __version__
from elza.utils.console import (
    custom_theme,
    print_error,
    print_event,
    print_info,
    print_pick,
    print_ready,
    print_success,
    print_warning,
    show_banner,
    show_version,
)


class TestCustomTheme:
    """Tests for custom Rich theme."""

    def test_theme_has_message_styles(self):
        for name in ("error", "success", "warning", "info", "event", "ready", "pick"):
            assert name in custom_theme.styles


class TestPrintFunctions:
    """Tests for print functions."""

    @patch("elza.utils.console.console_err")
    @patch("elza.utils.logging.log_message")
    def test_print_error(self, mock_log, mock_console_err):
        """print_error writes to stderr and logs."""
        print_error("Test error")

        mock_console_err.print.assert_called_once()
        assert "Test error" in mock_console_err.print.call_args[0][0]
        mock_log.assert_called_once_with("ERROR: Test error")

    @patch("elza.utils.console.console")
    @patch("elza.utils.logging.log_message")
    def test_print_success(self, mock_log, mock_console):
        print_success("Test success")

        assert "Test success" in mock_console.print.call_args[0][0]
        mock_log.assert_called_once_with("SUCCESS: Test success")

    @patch("elza.utils.console.console")
    @patch("elza.utils.logging.log_message")
    def test_print_warning(self, mock_log, mock_console):
        print_warning("Test warning")

        assert "Test warning" in mock_console.print.call_args[0][0]
        mock_log.assert_called_once_with("WARNING: Test warning")

    @patch("elza.utils.console.console")
    @patch("elza.utils.logging.log_message")
    def test_print_info(self, mock_log, mock_console):
        print_info("Test info")

        assert "Test info" in mock_console.print.call_args[0][0]
        mock_log.assert_called_once_with("INFO: Test info")

    @patch("elza.utils.console.console")
    @patch("elza.utils.logging.log_message")
    def test_print_event_and_ready(self, mock_log, mock_console):
        print_event("copied")
        print_ready("done")

        assert mock_console.print.call_count == 2
        mock_log.assert_any_call("EVENT: copied")
        mock_log.assert_any_call("READY: done")

    @patch("elza.utils.console.console")
    @patch("elza.utils.logging.log_message")
    def test_print_pick_is_not_logged(self, mock_log, mock_console):
        print_pick("framework: react")

        assert "framework: react" in mock_console.print.call_args[0][0]
        mock_log.assert_not_called()


class TestBanner:
    """Tests for banner display."""

    @patch("elza.utils.console.console")
    def test_show_banner_includes_version(self, mock_console):
        show_banner()

        assert f"elza-cli v{__version__}" in mock_console.print.call_args[0][0]

    @patch("elza.utils.console.console")
    def test_show_version(self, mock_console):
        show_version()

        assert __version__ in mock_console.print.call_args[0][0]
