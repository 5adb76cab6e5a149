"""Option axes and their dependency tables.

Each axis of a project (framework, build tool, language, loader, CSS
preprocessor, UI library, state manager) is a closed enum. Every member
knows which npm packages selecting it implies; the tables are data and
have no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from elza.templates.repository import TemplateSet
from elza.utils.errors import UnsupportedOptionError


class DependencyKind(Enum):
    """Which package.json section a dependency belongs to."""

    DEV = "dev"
    PROD = "prod"

    @property
    def section(self) -> str:
        """The package.json key for this kind."""
        return "devDependencies" if self is DependencyKind.DEV else "dependencies"


@dataclass(frozen=True)
class Dependency:
    """A single npm package requirement."""

    name: str
    version: str
    kind: DependencyKind = DependencyKind.DEV


def _dev(name: str, version: str) -> Dependency:
    return Dependency(name, version, DependencyKind.DEV)


def _prod(name: str, version: str) -> Dependency:
    return Dependency(name, version, DependencyKind.PROD)


class Framework(str, Enum):
    """Supported UI frameworks."""

    REACT = "react"

    @property
    def label(self) -> str:
        return "React"

    def dependencies(self) -> list[Dependency]:
        return [
            _prod("axios", "^1.7.9"),
            _prod("react", "^18.2.0"),
            _prod("react-dom", "^18.2.0"),
            _prod("react-router-dom", "^6.23.1"),
        ]


class BuildTool(str, Enum):
    """Supported bundlers / dev servers."""

    WEBPACK = "webpack"
    VITE = "vite"
    RSBUILD = "rsbuild"
    FARM = "farm"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def has_loader_axis(self) -> bool:
        """Only webpack lets the user choose the JS loader."""
        return self is BuildTool.WEBPACK

    @property
    def supports_js(self) -> bool:
        """Farm templates are TypeScript only."""
        return self is not BuildTool.FARM

    def dependencies(self) -> list[Dependency]:
        return list(_BUILD_TOOL_DEPENDENCIES[self])


_BUILD_TOOL_DEPENDENCIES: dict[BuildTool, tuple[Dependency, ...]] = {
    BuildTool.WEBPACK: (
        _dev("@elzajs/auto-route-plugin", "^0.1.6"),
        _dev("autoprefixer", "^10.4.19"),
        _dev("copy-webpack-plugin", "^12.0.2"),
        _dev("css-loader", "^7.1.1"),
        _dev("css-minimizer-webpack-plugin", "^7.0.0"),
        _dev("html-webpack-plugin", "^5.6.0"),
        _dev("terser-webpack-plugin", "^5.3.10"),
        _dev("mini-css-extract-plugin", "^2.9.0"),
        _dev("postcss-loader", "^8.1.1"),
        _dev("style-loader", "^4.0.0"),
        _dev("webpack", "^5.91.0"),
        _dev("webpack-cli", "^5.1.4"),
        _dev("webpack-dev-server", "^5.0.4"),
        _dev("webpack-merge", "^5.10.0"),
        _dev("webpackbar", "^6.0.1"),
    ),
    BuildTool.VITE: (_dev("vite", "^5.3.1"),),
    BuildTool.RSBUILD: (_dev("@rsbuild/core", "^1.0.10"),),
    BuildTool.FARM: (
        _dev("@farmfe/cli", "^1.0.2"),
        _dev("@farmfe/core", "^1.3.0"),
    ),
}


class Language(str, Enum):
    """Source language of the generated project."""

    JS = "js"
    TS = "ts"

    @property
    def label(self) -> str:
        return "TypeScript" if self is Language.TS else "JavaScript"

    def dependencies(self, build_tool: BuildTool, framework: Framework) -> list[Dependency]:
        """Packages implied by the language for a given build tool and framework."""
        # Farm ignores the language axis; every other pair is keyed explicitly.
        if build_tool is BuildTool.FARM:
            deps = [_dev("@farmfe/plugin-react", "^1.2.0")]
        else:
            deps = list(_LANGUAGE_DEPENDENCIES[(self, build_tool, framework)])
        if self is Language.TS:
            deps.extend(
                [
                    _dev("@types/react", "^18.3.2"),
                    _dev("@types/react-dom", "^18.3.0"),
                ]
            )
        return deps


_TYPESCRIPT = _dev("typescript", "^5.5.2")

_LANGUAGE_DEPENDENCIES: dict[tuple[Language, BuildTool, Framework], tuple[Dependency, ...]] = {
    (Language.JS, BuildTool.WEBPACK, Framework.REACT): (),
    (Language.TS, BuildTool.WEBPACK, Framework.REACT): (
        _dev("@babel/preset-typescript", "^7.24.1"),
        _dev("@types/node", "^20.12.12"),
        _dev("@types/webpack", "^5.28.5"),
        _dev("ts-node", "^10.9.2"),
        _TYPESCRIPT,
    ),
    (Language.JS, BuildTool.VITE, Framework.REACT): (
        _dev("@vitejs/plugin-react-swc", "^3.5.0"),
    ),
    (Language.TS, BuildTool.VITE, Framework.REACT): (
        _dev("@vitejs/plugin-react-swc", "^3.5.0"),
        _TYPESCRIPT,
    ),
    (Language.JS, BuildTool.RSBUILD, Framework.REACT): (
        _dev("@rsbuild/plugin-react", "^1.0.7"),
    ),
    (Language.TS, BuildTool.RSBUILD, Framework.REACT): (
        _dev("@rsbuild/plugin-react", "^1.0.7"),
        _TYPESCRIPT,
    ),
}


class JsLoader(str, Enum):
    """Transpiler used by webpack. NONE when the build tool brings its own."""

    BABEL = "babel"
    SWC = "swc"
    NONE = "none"

    @property
    def loader_name(self) -> str:
        return f"{self.value}-loader" if self is not JsLoader.NONE else ""

    def dependencies(self) -> list[Dependency]:
        if self is JsLoader.BABEL:
            return [
                _dev("@babel/core", "^7.24.5"),
                _dev("@babel/plugin-transform-runtime", "^7.24.7"),
                _dev("@babel/preset-env", "^7.24.5"),
                _dev("@babel/preset-react", "^7.24.1"),
                _prod("@babel/runtime", "^7.24.7"),
                _dev("babel-loader", "^9.1.3"),
                _dev("babel-plugin-auto-css-module", "1.0.0"),
            ]
        if self is JsLoader.SWC:
            return [
                _dev("@swc/core", "1.6.6"),
                _dev("swc-loader", "0.2.6"),
                _dev("swc-plugin-auto-css-module", "0.0.9"),
            ]
        return []


class CssPreset(str, Enum):
    """CSS preprocessor. NONE is never offered to the user."""

    SASS = "sass"
    LESS = "less"
    NONE = "none"

    @property
    def loader_name(self) -> str:
        return f"{self.value}-loader" if self is not CssPreset.NONE else ""

    @property
    def extension(self) -> str:
        return {CssPreset.SASS: "scss", CssPreset.LESS: "less"}.get(self, "css")

    def dependencies(self, build_tool: BuildTool) -> list[Dependency]:
        return list(_CSS_DEPENDENCIES.get((self, build_tool), ()))


_CSS_DEPENDENCIES: dict[tuple[CssPreset, BuildTool], tuple[Dependency, ...]] = {
    (CssPreset.SASS, BuildTool.WEBPACK): (
        _dev("sass", "^1.77.6"),
        _dev("sass-loader", "^14.2.1"),
    ),
    (CssPreset.LESS, BuildTool.WEBPACK): (
        _dev("less", "^4.1.3"),
        _dev("less-loader", "^11.1.0"),
    ),
    (CssPreset.SASS, BuildTool.VITE): (_dev("sass", "^1.77.6"),),
    (CssPreset.LESS, BuildTool.VITE): (_dev("less", "^4.1.3"),),
    (CssPreset.SASS, BuildTool.RSBUILD): (_dev("@rsbuild/plugin-sass", "^1.1.1"),),
    (CssPreset.LESS, BuildTool.RSBUILD): (_dev("@rsbuild/plugin-less", "^1.1.0"),),
    (CssPreset.SASS, BuildTool.FARM): (_dev("@farmfe/plugin-sass", "^1.1.0"),),
    (CssPreset.LESS, BuildTool.FARM): (_dev("@farmfe/js-plugin-less", "^1.11.0"),),
}


class UiLibrary(str, Enum):
    """Component library added to the project."""

    ANTD = "antd"
    ELEMENT_PLUS = "element-plus"
    NONE = "none"

    def dependencies(self) -> list[Dependency]:
        if self is UiLibrary.ANTD:
            return [_prod("antd", "^5.3.0")]
        if self is UiLibrary.ELEMENT_PLUS:
            return [_prod("element-plus", "^2.7.5")]
        return []


class StateManager(str, Enum):
    """Global state library added to the project."""

    ZUSTAND = "zustand"
    NONE = "none"

    def dependencies(self) -> list[Dependency]:
        if self is StateManager.ZUSTAND:
            return [_prod("zustand", "^4.5.4")]
        return []


class ProjectType(Enum):
    """One member per supported (build tool, framework, language) combination."""

    WEBPACK_REACT_JS = "webpack-react-js"
    WEBPACK_REACT_TS = "webpack-react-ts"
    VITE_REACT_JS = "vite-react-js"
    VITE_REACT_TS = "vite-react-ts"
    RSBUILD_REACT_JS = "rsbuild-react-js"
    RSBUILD_REACT_TS = "rsbuild-react-ts"
    FARM_REACT = "farm-react"

    @classmethod
    def resolve(cls, build_tool: BuildTool, framework: Framework, language: Language) -> ProjectType:
        if build_tool is BuildTool.FARM:
            return cls(f"farm-{framework.value}")
        return cls(f"{build_tool.value}-{framework.value}-{language.value}")

    @property
    def template_set(self) -> TemplateSet:
        """The build-tool specific template set for this project type."""
        return TemplateSet(self.value)


# element-plus only ships Vue components.
_UI_FRAMEWORKS: dict[UiLibrary, frozenset[Framework]] = {
    UiLibrary.ANTD: frozenset({Framework.REACT}),
    UiLibrary.ELEMENT_PLUS: frozenset(),
    UiLibrary.NONE: frozenset(Framework),
}


@dataclass(frozen=True)
class ProjectOptions:
    """A fully resolved configuration: exactly one value per axis."""

    framework: Framework
    build_tool: BuildTool
    language: Language
    loader: JsLoader = JsLoader.NONE
    css: CssPreset = CssPreset.NONE
    ui: UiLibrary = UiLibrary.NONE
    state: StateManager = StateManager.NONE

    @property
    def project_type(self) -> ProjectType:
        return ProjectType.resolve(self.build_tool, self.framework, self.language)

    def validate(self) -> None:
        """Reject combinations the templates cannot produce.

        Raises:
            UnsupportedOptionError: If any axis conflicts with another.
        """
        if self.build_tool.has_loader_axis and self.loader is JsLoader.NONE:
            raise UnsupportedOptionError(
                "loader", self.loader.value, f"{self.build_tool.value} needs babel or swc"
            )
        if not self.build_tool.has_loader_axis and self.loader is not JsLoader.NONE:
            raise UnsupportedOptionError(
                "loader", self.loader.value, f"{self.build_tool.value} has a built-in loader"
            )
        if not self.build_tool.supports_js and self.language is Language.JS:
            raise UnsupportedOptionError(
                "language", self.language.value, f"{self.build_tool.value} templates are TypeScript only"
            )
        if self.css is CssPreset.NONE:
            raise UnsupportedOptionError("style", self.css.value, "choose sass or less")
        if self.framework not in _UI_FRAMEWORKS[self.ui]:
            raise UnsupportedOptionError(
                "ui library", self.ui.value, f"not available for {self.framework.label}"
            )

    def dependencies(self) -> list[Dependency]:
        """Every dependency implied by this configuration, in merge order."""
        return [
            *self.framework.dependencies(),
            *self.build_tool.dependencies(),
            *self.language.dependencies(self.build_tool, self.framework),
            *self.loader.dependencies(),
            *self.css.dependencies(self.build_tool),
            *self.ui.dependencies(),
            *self.state.dependencies(),
        ]


@dataclass(frozen=True)
class OptionsRequest:
    """Option values supplied on the command line; None means not given.

    With ``cli`` set, missing values are never prompted for.
    """

    framework: Framework | None = None
    build_tool: BuildTool | None = None
    language: Language | None = None
    loader: JsLoader | None = None
    css: CssPreset | None = None
    ui: UiLibrary | None = None
    state: StateManager | None = None
    cli: bool = False


__all__ = [
    "BuildTool",
    "CssPreset",
    "Dependency",
    "DependencyKind",
    "Framework",
    "JsLoader",
    "Language",
    "OptionsRequest",
    "ProjectOptions",
    "ProjectType",
    "StateManager",
    "UiLibrary",
]
