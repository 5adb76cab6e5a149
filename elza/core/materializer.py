"""Copy template sets into a new project directory.

Sets are written in a fixed order (common, language common, build-tool
specific) so a file shipped by the specific set always replaces the
shared one of the same path.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from elza.core.options import BuildTool, JsLoader, Language, ProjectOptions
from elza.templates.repository import TemplateRepository, TemplateSet
from elza.utils.errors import FileSystemError, ProjectExistsError
from elza.utils.logging import log_message

RepositoryFactory = Callable[[TemplateSet], TemplateRepository]

# Build tools that ship their own entry page and router in the specific set.
_OWN_ENTRY_TOOLS = frozenset({BuildTool.VITE, BuildTool.FARM})


@dataclass
class MaterializeResult:
    """Files written into and skipped from the project, as relative paths.

    ``written`` has one entry per write, so a path overridden by a later
    set appears twice.
    """

    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def files(self) -> list[str]:
        """Distinct paths present in the project after materializing."""
        return sorted(set(self.written))


def template_sets_for(options: ProjectOptions) -> list[TemplateSet]:
    """Template sets for a configuration, in write order."""
    language_common = (
        TemplateSet.COMMON_REACT_TS
        if options.language is Language.TS
        else TemplateSet.COMMON_REACT_JS
    )
    return [TemplateSet.COMMON, language_common, options.project_type.template_set]


def should_skip_file(path: str, options: ProjectOptions, origin: TemplateSet) -> bool:
    """Decide whether a template file is left out of the project.

    Args:
        path: POSIX path relative to the template set root.
        options: The resolved configuration.
        origin: The set the file comes from.

    Returns:
        True if the file must not be written.
    """
    name = PurePosixPath(path).name
    tool = options.build_tool

    if tool is BuildTool.WEBPACK:
        if options.loader is JsLoader.BABEL and name == ".swcrc":
            return True
        if options.loader is JsLoader.SWC and name == "babel.config.json":
            return True
        return False

    if not origin.is_common:
        return False

    if tool is BuildTool.RSBUILD:
        return path.startswith("src/index")

    if tool in _OWN_ENTRY_TOOLS:
        return (
            path.startswith("src/index")
            or path.startswith("src/router")
            or path == "public/index.html"
        )

    return False


class ProjectMaterializer:
    """Writes the template files of a configuration into a fresh directory.

    Args:
        repository_factory: Builds the repository for a template set.
            Defaults to the packaged templates.
    """

    def __init__(self, repository_factory: RepositoryFactory | None = None) -> None:
        self._repository_factory = repository_factory or TemplateRepository

    def materialize(self, target_dir: Path, options: ProjectOptions) -> MaterializeResult:
        """Create ``target_dir`` and fill it with the project's template files.

        Nothing is rolled back on failure; files written before the error
        stay on disk.

        Raises:
            ProjectExistsError: If ``target_dir`` already exists.
            FileSystemError: On any other filesystem failure.
        """
        try:
            target_dir.mkdir()
        except FileExistsError as e:
            raise ProjectExistsError(target_dir) from e
        except OSError as e:
            raise FileSystemError(f"Failed to create {target_dir}: {e}") from e

        log_message(f"Created project directory {target_dir}")
        result = MaterializeResult()

        for template_set in template_sets_for(options):
            repository = self._repository_factory(template_set)
            for path in repository.list():
                if should_skip_file(path, options, template_set):
                    result.skipped.append(path)
                    continue
                self._write(target_dir, path, repository.get(path))
                result.written.append(path)

        log_message(
            f"Materialized {len(result.files)} files ({len(result.skipped)} skipped) into {target_dir}"
        )
        return result

    def _write(self, target_dir: Path, path: str, content: bytes) -> None:
        destination = target_dir.joinpath(*PurePosixPath(path).parts)
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(content)
        except OSError as e:
            raise FileSystemError(f"Failed to write {destination}: {e}") from e


__all__ = [
    "MaterializeResult",
    "ProjectMaterializer",
    "RepositoryFactory",
    "should_skip_file",
    "template_sets_for",
]
