"""External tools used by ELZA: git, package managers and the npm registry."""

from elza.integrations.git import git_init
from elza.integrations.package_manager import PackageManager, install_dependencies
from elza.integrations.registry import (
    VersionCheck,
    fetch_latest_version,
    get_user_npm_registry,
    is_newer_version,
    show_update_notice,
)

__all__ = [
    "PackageManager",
    "VersionCheck",
    "fetch_latest_version",
    "get_user_npm_registry",
    "git_init",
    "install_dependencies",
    "is_newer_version",
    "show_update_notice",
]
