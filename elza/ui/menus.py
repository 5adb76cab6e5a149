"""Option selection for ELZA.

Each axis is resolved from its command-line flag when one was given, and
otherwise from a single-choice list. Some listed choices have no templates
yet; picking one is reported as unsupported rather than hidden, so the
lists stay stable across releases.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import TypeVar

from elza.core.options import (
    BuildTool,
    CssPreset,
    Framework,
    JsLoader,
    Language,
    OptionsRequest,
    ProjectOptions,
    StateManager,
    UiLibrary,
)
from elza.ui.prompts import prompt_select
from elza.utils.console import print_pick
from elza.utils.errors import MissingOptionError, UnsupportedOptionError
from elza.utils.logging import log_message

E = TypeVar("E", bound=Enum)

# (label, value) pairs in display order. A None value is listed but unsupported.
FRAMEWORK_CHOICES: list[tuple[str, Framework | None]] = [
    ("react", Framework.REACT),
    ("vue", None),
]

BUILD_TOOL_CHOICES: list[tuple[str, BuildTool | None]] = [
    ("webpack", BuildTool.WEBPACK),
    ("vite", BuildTool.VITE),
    ("rsbuild", BuildTool.RSBUILD),
    ("farm", BuildTool.FARM),
]

LANGUAGE_CHOICES: list[tuple[str, Language | None]] = [
    ("typescript", Language.TS),
    ("javascript", Language.JS),
]

LOADER_CHOICES: list[tuple[str, JsLoader | None]] = [
    ("babel-loader", JsLoader.BABEL),
    ("swc-loader", JsLoader.SWC),
]

CSS_CHOICES: list[tuple[str, CssPreset | None]] = [
    ("sass", CssPreset.SASS),
    ("less", CssPreset.LESS),
    ("styled-components", None),
]

UI_CHOICES: list[tuple[str, UiLibrary | None]] = [
    ("antd", UiLibrary.ANTD),
    ("element-plus", UiLibrary.ELEMENT_PLUS),
    ("skip", UiLibrary.NONE),
]

STATE_CHOICES: list[tuple[str, StateManager | None]] = [
    ("zustand", StateManager.ZUSTAND),
    ("skip", StateManager.NONE),
]


def select_option(
    flag_value: E | None,
    axis: str,
    message: str,
    choices: list[tuple[str, E | None]],
) -> E:
    """Resolve one axis.

    Args:
        flag_value: Value given on the command line, returned unchanged
        axis: Axis name used in messages
        message: Prompt question
        choices: (label, value) pairs in display order

    Returns:
        The chosen enum value

    Raises:
        UnsupportedOptionError: If the chosen label has no value
        UserCancelledError: If the prompt is cancelled
    """
    if flag_value is not None:
        print_pick(f"{axis}: {flag_value.value}")
        log_message(f"Option {axis} from flag: {flag_value.value}")
        return flag_value

    labels = [label for label, _ in choices]
    index = prompt_select(message, labels)
    label, value = choices[index]
    if value is None:
        raise UnsupportedOptionError(axis, label, "not available yet")
    log_message(f"Option {axis} selected: {value.value}")
    return value


def select_framework(flag_value: Framework | None = None) -> Framework:
    return select_option(flag_value, "framework", "Select a framework:", FRAMEWORK_CHOICES)


def select_build_tool(flag_value: BuildTool | None = None) -> BuildTool:
    return select_option(flag_value, "build tool", "Select a build tool:", BUILD_TOOL_CHOICES)


def select_language(build_tool: BuildTool, flag_value: Language | None = None) -> Language:
    """Farm projects are always TypeScript and never ask."""
    if flag_value is None and not build_tool.supports_js:
        log_message(f"Language fixed to ts for {build_tool.value}")
        return Language.TS
    return select_option(flag_value, "language", "Select a language:", LANGUAGE_CHOICES)


def select_loader(build_tool: BuildTool, flag_value: JsLoader | None = None) -> JsLoader:
    """Only webpack asks for a loader; other tools bring their own."""
    if flag_value is None and not build_tool.has_loader_axis:
        return JsLoader.NONE
    return select_option(flag_value, "loader", "Select a JS loader:", LOADER_CHOICES)


def select_css(flag_value: CssPreset | None = None) -> CssPreset:
    return select_option(flag_value, "style", "Select a CSS preprocessor:", CSS_CHOICES)


def select_ui(flag_value: UiLibrary | None = None) -> UiLibrary:
    return select_option(flag_value, "ui library", "Select a UI library:", UI_CHOICES)


def select_state(flag_value: StateManager | None = None) -> StateManager:
    return select_option(flag_value, "state manager", "Select a state manager:", STATE_CHOICES)


def missing_cli_flags(request: OptionsRequest) -> list[str]:
    """Flags that must be given when prompting is disabled."""
    missing = []
    if request.framework is None:
        missing.append("--frame")
    if request.build_tool is None:
        missing.append("--pack")
    if request.language is None and (request.build_tool is None or request.build_tool.supports_js):
        missing.append("--lang")
    if request.loader is None and request.build_tool is not None and request.build_tool.has_loader_axis:
        missing.append("--loader")
    if request.css is None:
        missing.append("--style")
    return missing


def resolve_options(request: OptionsRequest) -> ProjectOptions:
    """Resolve every axis, in order, from flags and prompts.

    In --cli mode nothing is prompted: the UI library and state manager
    default to none, and every other missing axis is an error.

    Raises:
        MissingOptionError: If required flags are missing in --cli mode
        UnsupportedOptionError: If an unsupported choice is picked
        UserCancelledError: If a prompt is cancelled
    """
    if request.cli:
        missing = missing_cli_flags(request)
        if missing:
            raise MissingOptionError(missing)
        request = replace(
            request,
            ui=request.ui or UiLibrary.NONE,
            state=request.state or StateManager.NONE,
        )

    framework = select_framework(request.framework)
    build_tool = select_build_tool(request.build_tool)
    language = select_language(build_tool, request.language)
    loader = select_loader(build_tool, request.loader)
    css = select_css(request.css)
    ui = select_ui(request.ui)
    state = select_state(request.state)

    return ProjectOptions(
        framework=framework,
        build_tool=build_tool,
        language=language,
        loader=loader,
        css=css,
        ui=ui,
        state=state,
    )


__all__ = [
    "BUILD_TOOL_CHOICES",
    "CSS_CHOICES",
    "FRAMEWORK_CHOICES",
    "LANGUAGE_CHOICES",
    "LOADER_CHOICES",
    "STATE_CHOICES",
    "UI_CHOICES",
    "missing_cli_flags",
    "resolve_options",
    "select_build_tool",
    "select_css",
    "select_framework",
    "select_language",
    "select_loader",
    "select_option",
    "select_state",
    "select_ui",
]
