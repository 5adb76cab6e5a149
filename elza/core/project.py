"""Project creation flow.

Runs every step of ``elza create`` in order: collision check, background
version lookup, option resolution, template copy, config patching,
package.json update, git init and the optional install. Errors propagate
to the CLI; nothing written before a failure is removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from elza import PACKAGE_NAME, __version__
from elza.config.settings import Settings
from elza.core.manifest import PackageManifest
from elza.core.materializer import MaterializeResult, ProjectMaterializer
from elza.core.options import BuildTool, OptionsRequest, ProjectOptions
from elza.core.patcher import PatchResult, patch_config_file, replacements_for
from elza.integrations.git import git_init
from elza.integrations.package_manager import PackageManager, install_dependencies
from elza.integrations.registry import VersionCheck, get_user_npm_registry
from elza.ui.menus import resolve_options
from elza.utils.console import print_event, print_info, print_ready, print_success, show_banner
from elza.utils.errors import ProjectExistsError, UnsupportedOptionError
from elza.utils.logging import log_message

# Build tools whose routes are generated from src/pages.
_AUTO_ROUTE_TOOLS = frozenset({BuildTool.WEBPACK, BuildTool.RSBUILD})


@dataclass
class CreatedProject:
    """What a successful run produced."""

    path: Path
    options: ProjectOptions
    files: MaterializeResult
    patch: PatchResult | None = None
    package_manager: PackageManager | None = None


def resolve_package_manager(
    requested: PackageManager | None, settings: Settings
) -> PackageManager | None:
    """The manager to install with: the flag, else the configured default, else None.

    Raises:
        UnsupportedOptionError: If the configured default is not a known manager
    """
    if requested is not None:
        return requested
    configured = settings.default_package_manager.strip().lower()
    if not configured:
        return None
    try:
        return PackageManager(configured)
    except ValueError as e:
        raise UnsupportedOptionError("package manager", configured) from e


def start_version_check(settings: Settings) -> VersionCheck:
    registry = settings.npm_registry or get_user_npm_registry(Path(settings.npmrc_path))
    check = VersionCheck(
        PACKAGE_NAME,
        __version__,
        registry=registry,
        timeout=settings.version_check_timeout,
        enabled=settings.check_updates,
    )
    check.start()
    return check


def create_project(
    name: str,
    options_request: OptionsRequest,
    settings: Settings,
    *,
    cwd: Path | None = None,
    commit: bool | None = None,
    package_manager: PackageManager | None = None,
    materializer: ProjectMaterializer | None = None,
) -> CreatedProject:
    """Create project ``name`` under ``cwd``.

    Args:
        name: Project directory name, also written into package.json
        options_request: Option values from the command line
        settings: Loaded configuration
        cwd: Parent directory (defaults to the current directory)
        commit: Create the initial commit; None uses the configuration
        package_manager: Install with this manager; None uses the configuration
        materializer: Template writer, injectable for tests

    Raises:
        ElzaError: Any failure, with its exit code
    """
    show_banner()

    project_dir = (cwd or Path.cwd()) / name
    if project_dir.exists():
        raise ProjectExistsError(project_dir)

    manager = resolve_package_manager(package_manager, settings)
    version_check = start_version_check(settings)
    try:
        options = resolve_options(options_request)
        options.validate()
        log_message(f"Resolved options: {options}")

        files = (materializer or ProjectMaterializer()).materialize(project_dir, options)
        print_event(f"Copied {len(files.files)} template files into {name}")

        patch: PatchResult | None = None
        target = replacements_for(options)
        if target is not None:
            relative_path, replacements = target
            patch = patch_config_file(project_dir / relative_path, replacements)
            print_event(f"Configured {relative_path}")

        manifest = PackageManifest.load(project_dir)
        manifest.set_name(name)
        manifest.set_scripts(options.project_type)
        manifest.add_dependencies(options.dependencies())
        manifest.sort()
        manifest.write()
        print_event("Updated package.json")

        if settings.git_init:
            git_init(project_dir, commit=settings.initial_commit if commit is None else commit)
            print_event("Initialized git repository")

        if manager is not None:
            install_dependencies(project_dir, manager)
            print_success(f"Installed dependencies with {manager.value}")

        version_check.notify()
    finally:
        version_check.close()

    print_ready(f"Project {name} created")
    print_info(f"cd {name}")
    if manager is None:
        print_info("npm install")
    print_info((manager or PackageManager.NPM).run_command)
    if options.build_tool in _AUTO_ROUTE_TOOLS:
        print_info("Routes are generated from src/pages; add a folder there to add a page")

    return CreatedProject(
        path=project_dir,
        options=options,
        files=files,
        patch=patch,
        package_manager=manager,
    )


__all__ = [
    "CreatedProject",
    "create_project",
    "resolve_package_manager",
    "start_version_check",
]
