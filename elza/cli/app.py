"""CLI interface for ELZA.

This module provides the Typer-based command-line interface: the
``create`` command and the global ``--version`` flag.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from elza.config.manager import ConfigManager
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
from elza.core.project import create_project
from elza.integrations.package_manager import PackageManager
from elza.utils.console import print_error, print_info, show_version
from elza.utils.errors import ElzaError, ExitCode, UserCancelledError
from elza.utils.logging import log_message, setup_logging

E = TypeVar("E", bound=Enum)

# Create Typer app
app = typer.Typer(
    name="elza",
    help="ELZA - scaffold a front-end project from ready-made templates",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


def _parse_flag(enum_cls: type[E], value: str | None, flag: str, allow_none: bool = False) -> E | None:
    """Turn a flag value into an enum member, case-insensitively.

    The internal ``none`` member is accepted only where it is a real choice.
    """
    if value is None:
        return None
    allowed = [m for m in enum_cls if allow_none or m.value != "none"]
    for member in allowed:
        if member.value == value.strip().lower():
            return member
    choices = ", ".join(m.value for m in allowed)
    raise typer.BadParameter(f"'{value}' is not one of: {choices}", param_hint=flag)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """ELZA - scaffold a React project for webpack, vite, rsbuild or farm."""


@app.command()
def create(
    name: Annotated[str, typer.Argument(help="Name of the project directory to create")],
    frame: Annotated[
        str | None,
        typer.Option("--frame", "-f", help="Framework (react)"),
    ] = None,
    pack: Annotated[
        str | None,
        typer.Option("--pack", "-p", help="Build tool (webpack, vite, rsbuild, farm)"),
    ] = None,
    lang: Annotated[
        str | None,
        typer.Option("--lang", "-l", help="Language (js, ts); farm is always ts"),
    ] = None,
    loader: Annotated[
        str | None,
        typer.Option("--loader", help="JS loader for webpack (babel, swc)"),
    ] = None,
    style: Annotated[
        str | None,
        typer.Option("--style", "-s", help="CSS preprocessor (sass, less)"),
    ] = None,
    ui: Annotated[
        str | None,
        typer.Option("--ui", "-u", help="UI library (antd, element-plus, none)"),
    ] = None,
    state: Annotated[
        str | None,
        typer.Option("--state", help="State manager (zustand, none)"),
    ] = None,
    cli: Annotated[
        bool,
        typer.Option("--cli", "-c", help="Never prompt; fail if a required option is missing"),
    ] = False,
    commit: Annotated[
        bool | None,
        typer.Option("--commit/--no-commit", help="Create an initial git commit (default: from config)"),
    ] = None,
    install: Annotated[
        str | None,
        typer.Option("--install", help="Install dependencies with npm, yarn, pnpm or cnpm"),
    ] = None,
) -> None:
    """Create a new project in ./NAME."""
    request = OptionsRequest(
        framework=_parse_flag(Framework, frame, "--frame"),
        build_tool=_parse_flag(BuildTool, pack, "--pack"),
        language=_parse_flag(Language, lang, "--lang"),
        loader=_parse_flag(JsLoader, loader, "--loader"),
        css=_parse_flag(CssPreset, style, "--style"),
        ui=_parse_flag(UiLibrary, ui, "--ui", allow_none=True),
        state=_parse_flag(StateManager, state, "--state", allow_none=True),
        cli=cli,
    )
    package_manager = _parse_flag(PackageManager, install, "--install")

    try:
        settings = ConfigManager().load()
        setup_logging(settings)
        log_message(f"elza create {name}: {request}")
        create_project(
            name,
            request,
            settings,
            cwd=Path.cwd(),
            commit=commit,
            package_manager=package_manager,
        )

    except UserCancelledError as e:
        print_info(f"\n{e}")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e

    except ElzaError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.USER_CANCELLED) from e


__all__ = ["app", "create", "main"]
