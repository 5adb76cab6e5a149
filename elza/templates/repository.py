"""Read-only access to the packaged template sets.

Every template set is a directory under ``elza/templates/assets`` shipped
as package data. Paths are exposed as POSIX-style strings relative to the
set root, and file content is returned as raw bytes.
"""

from __future__ import annotations

from enum import Enum
from importlib.resources import files
from importlib.resources.abc import Traversable

from elza.utils.errors import TemplateNotFoundError


class TemplateSet(Enum):
    """Named template trees."""

    COMMON = "common"
    COMMON_REACT_JS = "common-react-js"
    COMMON_REACT_TS = "common-react-ts"
    WEBPACK_REACT_JS = "webpack-react-js"
    WEBPACK_REACT_TS = "webpack-react-ts"
    VITE_REACT_JS = "vite-react-js"
    VITE_REACT_TS = "vite-react-ts"
    RSBUILD_REACT_JS = "rsbuild-react-js"
    RSBUILD_REACT_TS = "rsbuild-react-ts"
    FARM_REACT = "farm-react"

    @property
    def is_common(self) -> bool:
        """Shared sets are filtered differently from build-tool specific ones."""
        return self.value.startswith("common")


def default_assets_root() -> Traversable:
    """Location of the packaged template sets."""
    return files("elza.templates").joinpath("assets")


class TemplateRepository:
    """One template set, with list/get access.

    Args:
        template_set: Which set to read.
        root: Directory holding every set. Defaults to the packaged assets;
            tests pass a temporary directory.
    """

    def __init__(self, template_set: TemplateSet, root: Traversable | None = None) -> None:
        self.template_set = template_set
        base = root if root is not None else default_assets_root()
        self._root = base.joinpath(template_set.value)

    def list(self) -> list[str]:
        """All file paths in the set, sorted, dotfiles included."""
        if not self._root.is_dir():
            return []
        paths: list[str] = []
        self._walk(self._root, "", paths)
        return sorted(paths)

    def _walk(self, node: Traversable, prefix: str, out: list[str]) -> None:
        for child in node.iterdir():
            relative = f"{prefix}{child.name}"
            if child.is_dir():
                self._walk(child, f"{relative}/", out)
            else:
                out.append(relative)

    def get(self, path: str) -> bytes:
        """Return the bytes of one file.

        Raises:
            TemplateNotFoundError: If the set does not contain ``path``.
        """
        node = self._root
        for part in path.split("/"):
            node = node.joinpath(part)
        if not node.is_file():
            raise TemplateNotFoundError(self.template_set.value, path)
        return node.read_bytes()


__all__ = [
    "TemplateSet",
    "TemplateRepository",
    "default_assets_root",
]
