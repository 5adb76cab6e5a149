"""Tests for elza.ui.menus module."""

from unittest.mock import patch

import pytest

from elza.core.options import (
    BuildTool,
    CssPreset,
    Framework,
    JsLoader,
    Language,
    OptionsRequest,
    StateManager,
    UiLibrary,
)
from elza.ui.menus import (
    CSS_CHOICES,
    missing_cli_flags,
    resolve_options,
    select_framework,
    select_language,
    select_loader,
    select_option,
)
from elza.utils.errors import MissingOptionError, UnsupportedOptionError, UserCancelledError


@pytest.fixture(autouse=True)
def quiet_picks():
    with patch("elza.ui.menus.print_pick"):
        yield


class TestSelectOption:
    """Tests for the generic axis selector."""

    @patch("elza.ui.menus.prompt_select")
    def test_flag_value_returned_unchanged(self, mock_prompt):
        assert select_option(CssPreset.LESS, "style", "?", CSS_CHOICES) is CssPreset.LESS
        mock_prompt.assert_not_called()

    @patch("elza.ui.menus.prompt_select", return_value=0)
    def test_only_flag_values_are_echoed(self, mock_prompt):
        with patch("elza.ui.menus.print_pick") as mock_pick:
            select_option(CssPreset.LESS, "style", "?", CSS_CHOICES)
            select_option(None, "style", "?", CSS_CHOICES)

        mock_pick.assert_called_once_with("style: less")

    @patch("elza.ui.menus.prompt_select", return_value=1)
    def test_index_maps_to_value(self, mock_prompt):
        assert select_option(None, "style", "Select a CSS preprocessor:", CSS_CHOICES) is CssPreset.LESS
        mock_prompt.assert_called_once_with(
            "Select a CSS preprocessor:", ["sass", "less", "styled-components"]
        )

    @patch("elza.ui.menus.prompt_select", return_value=2)
    def test_unmapped_label_is_unsupported(self, mock_prompt):
        with pytest.raises(UnsupportedOptionError, match="styled-components"):
            select_option(None, "style", "?", CSS_CHOICES)

    @patch("elza.ui.menus.prompt_select", return_value=1)
    def test_vue_is_unsupported(self, mock_prompt):
        with pytest.raises(UnsupportedOptionError, match="vue"):
            select_framework()

    @patch("elza.ui.menus.prompt_select", side_effect=UserCancelledError("cancelled"))
    def test_cancel_propagates(self, mock_prompt):
        with pytest.raises(UserCancelledError):
            select_framework()


class TestConditionalAxes:
    """Language and loader depend on the build tool."""

    @patch("elza.ui.menus.prompt_select")
    def test_farm_is_always_typescript(self, mock_prompt):
        assert select_language(BuildTool.FARM) is Language.TS
        mock_prompt.assert_not_called()

    @patch("elza.ui.menus.prompt_select", return_value=1)
    def test_language_prompt(self, mock_prompt):
        assert select_language(BuildTool.VITE) is Language.JS

    @patch("elza.ui.menus.prompt_select")
    def test_loader_not_asked_outside_webpack(self, mock_prompt):
        for build_tool in (BuildTool.VITE, BuildTool.RSBUILD, BuildTool.FARM):
            assert select_loader(build_tool) is JsLoader.NONE
        mock_prompt.assert_not_called()

    @patch("elza.ui.menus.prompt_select", return_value=1)
    def test_webpack_asks_for_loader(self, mock_prompt):
        assert select_loader(BuildTool.WEBPACK) is JsLoader.SWC


class TestResolveOptions:
    """Tests for resolve_options."""

    @patch("elza.ui.menus.prompt_select")
    def test_interactive_order(self, mock_prompt):
        # framework, build tool, language, loader, css, ui, state
        mock_prompt.side_effect = [0, 0, 0, 1, 0, 0, 0]

        options = resolve_options(OptionsRequest())

        assert options.framework is Framework.REACT
        assert options.build_tool is BuildTool.WEBPACK
        assert options.language is Language.TS
        assert options.loader is JsLoader.SWC
        assert options.css is CssPreset.SASS
        assert options.ui is UiLibrary.ANTD
        assert options.state is StateManager.ZUSTAND
        messages = [c.args[0] for c in mock_prompt.call_args_list]
        assert messages == [
            "Select a framework:",
            "Select a build tool:",
            "Select a language:",
            "Select a JS loader:",
            "Select a CSS preprocessor:",
            "Select a UI library:",
            "Select a state manager:",
        ]

    @patch("elza.ui.menus.prompt_select")
    def test_farm_skips_language_and_loader(self, mock_prompt):
        # framework, build tool, css, ui (skip), state (skip)
        mock_prompt.side_effect = [0, 3, 1, 2, 1]

        options = resolve_options(OptionsRequest())

        assert options.build_tool is BuildTool.FARM
        assert options.language is Language.TS
        assert options.loader is JsLoader.NONE
        assert options.css is CssPreset.LESS
        assert options.ui is UiLibrary.NONE
        assert options.state is StateManager.NONE
        assert mock_prompt.call_count == 5

    @patch("elza.ui.menus.prompt_select")
    def test_flags_and_prompts_mix(self, mock_prompt):
        mock_prompt.side_effect = [1, 1]  # ui: element-plus, state: skip

        options = resolve_options(
            OptionsRequest(
                framework=Framework.REACT,
                build_tool=BuildTool.VITE,
                language=Language.JS,
                css=CssPreset.SASS,
            )
        )

        assert options.ui is UiLibrary.ELEMENT_PLUS
        assert options.state is StateManager.NONE


class TestCliMode:
    """--cli never prompts."""

    @patch("elza.ui.menus.prompt_select")
    def test_complete_flags(self, mock_prompt):
        options = resolve_options(
            OptionsRequest(
                framework=Framework.REACT,
                build_tool=BuildTool.WEBPACK,
                language=Language.TS,
                loader=JsLoader.BABEL,
                css=CssPreset.SASS,
                cli=True,
            )
        )

        assert options.ui is UiLibrary.NONE
        assert options.state is StateManager.NONE
        mock_prompt.assert_not_called()

    @patch("elza.ui.menus.prompt_select")
    def test_farm_needs_no_language(self, mock_prompt):
        options = resolve_options(
            OptionsRequest(
                framework=Framework.REACT, build_tool=BuildTool.FARM, css=CssPreset.SASS, cli=True
            )
        )

        assert options.language is Language.TS
        mock_prompt.assert_not_called()

    @patch("elza.ui.menus.prompt_select")
    def test_missing_flags_are_listed(self, mock_prompt):
        with pytest.raises(MissingOptionError) as exc_info:
            resolve_options(OptionsRequest(build_tool=BuildTool.WEBPACK, cli=True))

        assert exc_info.value.flags == ["--frame", "--lang", "--loader", "--style"]
        mock_prompt.assert_not_called()

    def test_missing_flags_without_build_tool(self):
        assert missing_cli_flags(OptionsRequest(cli=True)) == ["--frame", "--pack", "--lang", "--style"]
