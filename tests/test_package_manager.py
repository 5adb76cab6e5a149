"""Tests for elza.integrations.package_manager module."""

from unittest.mock import MagicMock, patch

import pytest

from elza.integrations.package_manager import PackageManager, install_dependencies
from elza.utils.errors import DependencyInstallError


@pytest.fixture(autouse=True)
def quiet_events():
    with patch("elza.integrations.package_manager.print_event"):
        yield


class TestPackageManager:
    def test_install_command(self):
        assert PackageManager.PNPM.install_command == ["pnpm", "install"]

    def test_run_command(self):
        assert PackageManager.NPM.run_command == "npm run start"
        assert PackageManager.YARN.run_command == "yarn start"


class TestInstallDependencies:
    """Tests for install_dependencies."""

    def test_runs_install_in_project(self, mock_subprocess, tmp_path):
        install_dependencies(tmp_path, PackageManager.YARN)

        mock_subprocess.assert_called_once_with(["yarn", "install"], cwd=tmp_path)

    def test_failure(self, mock_subprocess, tmp_path):
        mock_subprocess.return_value = MagicMock(returncode=1)

        with pytest.raises(DependencyInstallError, match="exit code 1"):
            install_dependencies(tmp_path, PackageManager.NPM)

    def test_manager_not_installed(self, mock_subprocess, tmp_path):
        mock_subprocess.side_effect = FileNotFoundError("cnpm")

        with pytest.raises(DependencyInstallError, match="cnpm install"):
            install_dependencies(tmp_path, PackageManager.CNPM)
