"""Latest-version lookup against the npm registry.

The lookup runs on a daemon thread while the project is being created, so
an early exit never waits on it. It never raises: any failure simply means
no update notice.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path

import httpx
from rich.panel import Panel

from elza.utils.console import console
from elza.utils.logging import log_message

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY = "https://registry.npmjs.org/"
DEFAULT_TIMEOUT_SECONDS = 5.0


def get_user_npm_registry(npmrc_path: Path | None = None) -> str:
    """Registry URL from the first ``registry=`` line of the npm user config.

    Falls back to the public registry when the file is missing, unreadable
    or has no such line.
    """
    path = npmrc_path or Path.home() / ".npmrc"
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return DEFAULT_REGISTRY

    for line in lines:
        key, sep, value = line.strip().partition("=")
        if sep and key.strip() == "registry" and value.strip():
            return value.strip()
    return DEFAULT_REGISTRY


def fetch_latest_version(
    package: str,
    registry: str = DEFAULT_REGISTRY,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    *,
    client: httpx.Client | None = None,
) -> str | None:
    """Return ``dist-tags.latest`` of ``package``, or None on any failure.

    Args:
        package: npm package name
        registry: Registry base URL
        timeout: Request timeout in seconds
        client: Optional client to send the request with
    """
    url = f"{registry.rstrip('/')}/{package}"
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
                response = own_client.get(url)
        response.raise_for_status()
        payload = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning(f"Version lookup for {package} failed: {e}")
        return None

    dist_tags = payload.get("dist-tags") if isinstance(payload, dict) else None
    latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
    if not isinstance(latest, str):
        logger.warning(f"Registry response for {package} has no dist-tags.latest")
        return None
    log_message(f"Latest published {package}: {latest}")
    return latest


def _parse_version(version: str) -> list[int]:
    return [int(part) for part in version.strip().lstrip("v").split(".")]


def is_newer_version(current: str, latest: str) -> bool:
    """True if ``latest`` is strictly greater than ``current``.

    Versions are compared component-wise as integers; a missing component
    counts as 0. Anything that is not a dotted numeric version compares as
    not newer.
    """
    try:
        current_parts = _parse_version(current)
        latest_parts = _parse_version(latest)
    except ValueError:
        return False

    width = max(len(current_parts), len(latest_parts))
    current_parts += [0] * (width - len(current_parts))
    latest_parts += [0] * (width - len(latest_parts))
    return latest_parts > current_parts


def show_update_notice(current: str, latest: str, package: str = "elza-cli") -> None:
    """Print a bordered upgrade notice."""
    body = (
        f"Update available [dim]{current}[/dim] → [green]{latest}[/green]\n"
        f"Run [cyan]npm i -g {package}[/cyan] to update"
    )
    console.print(Panel(body, border_style="yellow", expand=False, padding=(1, 4)))
    log_message(f"Update notice shown: {current} -> {latest}")


class VersionCheck:
    """Background lookup of the latest published version.

    Args:
        package: npm package name to look up
        current: The running version
        registry: Registry base URL
        timeout: HTTP timeout, also bounding the final wait
        enabled: When False, nothing is submitted and no notice is shown
    """

    def __init__(
        self,
        package: str,
        current: str,
        registry: str = DEFAULT_REGISTRY,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        enabled: bool = True,
    ) -> None:
        self.package = package
        self.current = current
        self.registry = registry
        self.timeout = timeout
        self.enabled = enabled
        self._future: Future[str | None] | None = None

    def start(self) -> None:
        if not self.enabled or self._future is not None:
            return
        self._future = Future()
        thread = threading.Thread(
            target=self._run, args=(self._future,), name="elza-version", daemon=True
        )
        thread.start()
        log_message(f"Version check started against {self.registry}")

    def _run(self, future: Future[str | None]) -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(fetch_latest_version(self.package, self.registry, self.timeout))
        except Exception as e:
            future.set_exception(e)

    def result(self) -> str | None:
        """Wait for the lookup and return a newer version, or None."""
        if self._future is None or self._future.cancelled():
            return None
        try:
            # Grace on top of the HTTP timeout for connect plus read.
            latest = self._future.result(timeout=self.timeout * 2)
        except FutureTimeoutError:
            log_message("Version check did not finish in time")
            return None
        except Exception as e:
            logger.warning(f"Version check failed: {e}")
            return None

        if latest and is_newer_version(self.current, latest):
            return latest
        return None

    def notify(self) -> None:
        """Print the update notice if a newer version is published."""
        latest = self.result()
        if latest:
            show_update_notice(self.current, latest, self.package)

    def close(self) -> None:
        """Abandon the lookup without waiting for it.

        A lookup still in flight keeps running on its daemon thread and its
        outcome is discarded. Safe to call more than once.
        """
        if self._future is None or self._future.done():
            return
        self._future.cancel()
        log_message("Version check abandoned")


__all__ = [
    "DEFAULT_REGISTRY",
    "VersionCheck",
    "fetch_latest_version",
    "get_user_npm_registry",
    "is_newer_version",
    "show_update_notice",
]
