"""Shared pytest fixtures for ELZA tests."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from elza.config.settings import Settings
from elza.core.options import (
    BuildTool,
    CssPreset,
    Framework,
    JsLoader,
    Language,
    ProjectOptions,
)

# Minimal template sets: enough files to exercise every skip rule.
FAKE_TEMPLATES: dict[str, dict[str, str]] = {
    "common": {
        ".gitignore": "node_modules\n",
        "README.md": "# template\n",
        "public/index.html": "<div id=\"root\"></div>\n",
    },
    "common-react-js": {
        "src/index.jsx": "common js entry\n",
        "src/router/index.jsx": "common js router\n",
        "src/pages/home/index.jsx": "home\n",
    },
    "common-react-ts": {
        "src/index.tsx": "common ts entry\n",
        "src/router/index.tsx": "common ts router\n",
        "src/pages/home/index.tsx": "home\n",
    },
    "webpack-react-ts": {
        ".swcrc": "{}\n",
        "babel.config.json": "{}\n",
        "package.json": '{"name": "react-template", "dependencies": {}, "devDependencies": {}}\n',
        "scripts/webpack.common.ts": "use `placeholder:0` for `placeholder:1` with `placeholder:2`\n",
    },
    "vite-react-js": {
        "index.html": "<script src=\"/src/index.jsx\"></script>\n",
        "src/index.jsx": "vite entry\n",
        "package.json": '{"name": "react-template", "dependencies": {}, "devDependencies": {}}\n',
    },
    "rsbuild-react-js": {
        "src/index.jsx": "rsbuild entry\n",
        "src/router/routes.jsx": "routes\n",
        "rsbuild.config.mjs": "`placeholder:0`;\nplugins: [pluginReact(), `placeholder:1`]\n",
        "package.json": '{"name": "react-template", "dependencies": {}, "devDependencies": {}}\n',
    },
    "farm-react": {
        "index.html": "<script src=\"/src/index.tsx\"></script>\n",
        "src/index.tsx": "farm entry\n",
        "src/router/index.tsx": "farm router\n",
        "farm.config.ts": "import x;`placeholder:0`\nplugins: [`placeholder:1`]\n",
        "package.json": '{"name": "react-template", "dependencies": {}, "devDependencies": {}}\n',
    },
}


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep the user's ELZA_ variables out of every test."""
    for key in Settings.get_config_keys():
        monkeypatch.delenv(f"ELZA_{key}", raising=False)


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """A directory holding the fake template sets."""
    root = tmp_path / "templates"
    for template_set, entries in FAKE_TEMPLATES.items():
        for relative, content in entries.items():
            path = root / template_set / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
    return root


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary config file with sample values."""
    config_file = tmp_path / ".elza-config"
    config_file.write_text(
        """# ELZA Configuration
NPM_REGISTRY="https://registry.npmmirror.com/"
CHECK_UPDATES="false"
VERSION_CHECK_TIMEOUT="2.5"
GIT_INIT="true"
INITIAL_COMMIT="yes"
DEFAULT_PACKAGE_MANAGER='pnpm'
"""
    )
    return config_file


@pytest.fixture
def webpack_ts_options() -> ProjectOptions:
    return ProjectOptions(
        framework=Framework.REACT,
        build_tool=BuildTool.WEBPACK,
        language=Language.TS,
        loader=JsLoader.SWC,
        css=CssPreset.SASS,
    )


@pytest.fixture
def vite_js_options() -> ProjectOptions:
    return ProjectOptions(
        framework=Framework.REACT,
        build_tool=BuildTool.VITE,
        language=Language.JS,
        css=CssPreset.LESS,
    )


@pytest.fixture
def mock_subprocess():
    """Mock subprocess.run for git and package manager commands."""
    with patch("subprocess.run") as mock:
        mock.return_value = MagicMock(
            returncode=0,
            stdout="",
            stderr="",
        )
        yield mock


@pytest.fixture
def mock_console(monkeypatch):
    """Mock console output for testing."""
    mock = MagicMock()
    monkeypatch.setattr("elza.utils.console.console", mock)
    return mock
