"""Editing of the generated project's package.json.

The manifest is parsed once into an ordered dict, edited in memory through
the accessors below and written back once.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from elza.core.options import Dependency, DependencyKind, ProjectType
from elza.utils.errors import ManifestError
from elza.utils.logging import log_message

MANIFEST_NAME = "package.json"

_WEBPACK_DEV = "webpack serve --node-env development -c scripts/webpack.dev"
_WEBPACK_PROD = "webpack --node-env production -c scripts/webpack.prod"

# npm scripts written into package.json for each project type.
SCRIPTS: dict[ProjectType, dict[str, str]] = {
    ProjectType.WEBPACK_REACT_JS: {
        "start": f"{_WEBPACK_DEV}.js",
        "build": f"{_WEBPACK_PROD}.js",
    },
    ProjectType.WEBPACK_REACT_TS: {
        "start": f"{_WEBPACK_DEV}.ts",
        "build": f"tsc --noEmit && {_WEBPACK_PROD}.ts",
    },
    ProjectType.VITE_REACT_JS: {
        "start": "vite",
        "build": "vite build",
        "preview": "vite preview",
    },
    ProjectType.VITE_REACT_TS: {
        "start": "vite",
        "build": "tsc --noEmit && vite build",
        "preview": "vite preview",
    },
    ProjectType.RSBUILD_REACT_JS: {
        "start": "rsbuild dev",
        "build": "rsbuild build",
        "preview": "rsbuild preview",
    },
    ProjectType.RSBUILD_REACT_TS: {
        "start": "rsbuild dev",
        "build": "rsbuild build",
        "preview": "rsbuild preview",
    },
    ProjectType.FARM_REACT: {
        "start": "farm start",
        "build": "farm build",
        "preview": "farm preview",
    },
}

_DEPENDENCY_SECTIONS = tuple(kind.section for kind in DependencyKind)


class PackageManifest:
    """In-memory package.json of a project directory.

    Attributes:
        path: Location of the package.json file
        data: Parsed document, key order preserved
    """

    def __init__(self, path: Path, data: dict[str, Any]) -> None:
        self.path = path
        self.data = data

    @classmethod
    def load(cls, project_dir: Path) -> PackageManifest:
        """Parse ``project_dir/package.json``.

        Raises:
            ManifestError: If the file is missing, unreadable, not JSON,
                or not a JSON object.
        """
        path = project_dir / MANIFEST_NAME
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ManifestError(f"{path} not found") from e
        except OSError as e:
            raise ManifestError(f"Failed to read {path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ManifestError(f"{path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ManifestError(f"{path} must contain a JSON object")
        return cls(path, data)

    def set_name(self, name: str) -> None:
        self.data["name"] = name

    def set_scripts(self, project_type: ProjectType) -> None:
        """Write the npm scripts of ``project_type``, keeping any other scripts."""
        scripts = self.data.setdefault("scripts", {})
        if not isinstance(scripts, dict):
            raise ManifestError(f"'scripts' in {self.path} must be an object")
        scripts.update(SCRIPTS[project_type])

    def add_dependency(self, dependency: Dependency) -> None:
        """Set one dependency in its section, replacing an existing entry.

        Raises:
            ManifestError: If the target section is missing or not an object.
        """
        section_name = dependency.kind.section
        section = self.data.get(section_name)
        if not isinstance(section, dict):
            raise ManifestError(f"'{section_name}' in {self.path} is missing or not an object")
        section[dependency.name] = dependency.version

    def add_dependencies(self, dependencies: list[Dependency]) -> None:
        for dependency in dependencies:
            self.add_dependency(dependency)

    def sort(self) -> None:
        """Order the dependency sections by package name."""
        for section_name in _DEPENDENCY_SECTIONS:
            if section_name in self.data:
                self.data[section_name] = _sorted_value(self.data[section_name])

    def to_json(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False) + "\n"

    def write(self) -> None:
        """Persist the document.

        Raises:
            ManifestError: If the file cannot be written.
        """
        try:
            self.path.write_text(self.to_json(), encoding="utf-8")
        except OSError as e:
            raise ManifestError(f"Failed to write {self.path}: {e}") from e
        log_message(f"Wrote {self.path}")


def _sorted_value(value: Any) -> Any:
    if isinstance(value, dict):
        return dict(sorted(value.items()))
    if isinstance(value, list):
        return [_sorted_value(item) for item in value]
    return value


__all__ = [
    "MANIFEST_NAME",
    "SCRIPTS",
    "PackageManifest",
]
