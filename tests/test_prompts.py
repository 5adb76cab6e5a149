"""Tests for elza.ui.prompts module."""

from unittest.mock import patch

import pytest

from elza.ui.prompts import custom_style, prompt_select
from elza.utils.errors import UserCancelledError


class TestCustomStyle:
    """Tests for custom_style."""

    def test_style_has_pointer(self):
        assert any("pointer" in str(s) for s in custom_style.style_rules)


class TestPromptSelect:
    """Tests for prompt_select function."""

    @patch("questionary.select")
    def test_returns_index(self, mock_select):
        mock_select.return_value.ask.return_value = 2

        result = prompt_select("Pick", ["a", "b", "c"])

        assert result == 2

    @patch("questionary.select")
    def test_first_item_is_default(self, mock_select):
        mock_select.return_value.ask.return_value = 0

        prompt_select("Pick", ["a", "b"])

        kwargs = mock_select.call_args.kwargs
        assert kwargs["default"].title == "a"
        assert [c.value for c in kwargs["choices"]] == [0, 1]

    @patch("questionary.select")
    def test_raises_on_cancel(self, mock_select):
        mock_select.return_value.ask.return_value = None

        with pytest.raises(UserCancelledError):
            prompt_select("Pick", ["a"])

    @patch("questionary.select")
    def test_raises_on_ctrl_c(self, mock_select):
        mock_select.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(UserCancelledError):
            prompt_select("Pick", ["a"])
