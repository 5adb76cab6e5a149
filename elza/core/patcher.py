"""Placeholder substitution in build-tool config files.

Config templates carry positional markers of the form `` `placeholder:N` ``
(backticks included). Marker N is replaced by the N-th replacement string;
markers without a replacement are left untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from elza.core.options import BuildTool, CssPreset, Language, ProjectOptions
from elza.utils.console import print_warning
from elza.utils.errors import FileSystemError
from elza.utils.logging import log_message

PLACEHOLDER_PATTERN = re.compile(r"`placeholder:(\d+)`")

_RSBUILD_CSS: dict[CssPreset, list[str]] = {
    CssPreset.SASS: ["\nimport { pluginSass } from '@rsbuild/plugin-sass';", "pluginSass()"],
    CssPreset.LESS: ["\nimport { pluginLess } from '@rsbuild/plugin-less';", "pluginLess()"],
}

_FARM_CSS: dict[CssPreset, list[str]] = {
    CssPreset.SASS: ["", "'@farmfe/plugin-sass'"],
    CssPreset.LESS: ["\nimport less from '@farmfe/js-plugin-less';", "less()"],
}


@dataclass
class PatchResult:
    """Outcome of patching one file.

    Attributes:
        path: The patched file
        replaced: Number of markers substituted
        unresolved: Indices of markers left in place
    """

    path: Path
    replaced: int = 0
    unresolved: list[int] = field(default_factory=list)


def apply_placeholders(text: str, replacements: list[str]) -> tuple[str, int, list[int]]:
    """Substitute markers in ``text``.

    Returns:
        The new text, the number of replaced markers and the sorted,
        distinct indices of markers that had no replacement.
    """
    replaced = 0
    unresolved: set[int] = set()

    def substitute(match: re.Match) -> str:
        nonlocal replaced
        index = int(match.group(1))
        if index < len(replacements):
            replaced += 1
            return replacements[index]
        unresolved.add(index)
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(substitute, text), replaced, sorted(unresolved)


def patch_config_file(path: Path, replacements: list[str]) -> PatchResult:
    """Rewrite ``path`` in place with its markers substituted.

    Raises:
        FileSystemError: If the file cannot be read or written.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Failed to read {path}: {e}") from e

    patched, replaced, unresolved = apply_placeholders(text, replacements)

    try:
        path.write_text(patched, encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Failed to write {path}: {e}") from e

    log_message(f"Patched {path}: {replaced} placeholder(s) replaced")
    if unresolved:
        markers = ", ".join(f"placeholder:{i}" for i in unresolved)
        print_warning(f"Unresolved markers left in {path.name}: {markers}")
    return PatchResult(path=path, replaced=replaced, unresolved=unresolved)


def replacements_for(options: ProjectOptions) -> tuple[str, list[str]] | None:
    """The config file to patch and its replacements, or None for no patching.

    The path is relative to the project root.
    """
    tool = options.build_tool
    is_ts = options.language is Language.TS

    if tool is BuildTool.WEBPACK:
        extension = "ts" if is_ts else "js"
        return (
            f"scripts/webpack.common.{extension}",
            [options.css.loader_name, options.css.extension, options.loader.loader_name],
        )
    if tool is BuildTool.RSBUILD:
        filename = "rsbuild.config.ts" if is_ts else "rsbuild.config.mjs"
        return filename, list(_RSBUILD_CSS.get(options.css, ["", ""]))
    if tool is BuildTool.FARM:
        return "farm.config.ts", list(_FARM_CSS.get(options.css, ["", ""]))
    return None


__all__ = [
    "PLACEHOLDER_PATTERN",
    "PatchResult",
    "apply_placeholders",
    "patch_config_file",
    "replacements_for",
]
