"""Periodic checks for newer releases of the command-line client."""

from __future__ import annotations

import abc
import asyncio
import enum
import json
import time
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

import semver

VERSION_CHECK_INTERVAL = 24 * 60 * 60.0
"""Seconds between update checks."""

_POLL_INTERVAL = 60.0
_REQUEST_TIMEOUT = 10.0

GITHUB_RELEASES_URL = "https://api.github.com/repos/nexus-xyz/nexus-cli/releases/latest"


class EventType(enum.Enum):
    """Kind of event reported to the user interface."""

    SUCCESS = "success"
    ERROR = "error"
    REFRESH = "refresh"
    SHUTDOWN = "shutdown"


class LogLevel(enum.IntEnum):
    """Severity of an event, ordered from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


def _now_timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True)
class VersionEvent:
    """An event emitted by the version checker."""

    msg: str
    event_type: EventType
    log_level: LogLevel
    timestamp: str = field(default_factory=_now_timestamp)


class VersionCheckError(RuntimeError):
    """Raised when the latest release cannot be fetched."""


@dataclass(frozen=True)
class GitHubRelease:
    """The fields of a release that the checker uses."""

    tag_name: str
    name: str
    published_at: str
    html_url: str
    prerelease: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GitHubRelease:
        """Build a release from decoded API JSON; raises VersionCheckError on bad data."""
        try:
            return cls(
                tag_name=str(data["tag_name"]),
                name=str(data["name"]),
                published_at=str(data["published_at"]),
                html_url=str(data["html_url"]),
                prerelease=bool(data["prerelease"]),
            )
        except (KeyError, TypeError) as exc:
            raise VersionCheckError(f"error decoding response body: {exc}") from exc


def parse_version(version: str) -> semver.Version:
    """Parse a semantic version, accepting an optional leading 'v'."""
    clean = version[1:] if version.startswith("v") else version
    return semver.Version.parse(clean)


@dataclass
class VersionInfo:
    """What is known about the current and latest versions."""

    current_version: str
    latest_version: str | None = None
    update_available: bool = False
    release_url: str | None = None
    last_check: float | None = None

    def update_from_release(self, release: GitHubRelease) -> None:
        """Record a fetched release and whether it is newer than ours."""
        self.latest_version = release.tag_name
        self.release_url = release.html_url
        self.update_available = self.is_newer_version(release.tag_name)
        self.last_check = time.monotonic()

    def is_newer_version(self, latest: str) -> bool:
        """True if ``latest`` parses and is newer than the current version."""
        try:
            current = parse_version(self.current_version)
            latest_ver = parse_version(latest)
        except (ValueError, TypeError):
            return False
        return latest_ver > current


class VersionCheckable(abc.ABC):
    """Source of release information."""

    current_version: str

    @abc.abstractmethod
    async def check_latest_version(self) -> GitHubRelease:
        """Fetch the latest release."""


class VersionChecker(VersionCheckable):
    """Queries the GitHub releases API."""

    def __init__(self, current_version: str) -> None:
        self.current_version = current_version
        self._user_agent = f"nexus-cli/{current_version}"

    def _fetch(self) -> GitHubRelease:
        request = urllib.request.Request(
            GITHUB_RELEASES_URL, headers={"User-Agent": self._user_agent}
        )
        try:
            with urllib.request.urlopen(request, timeout=_REQUEST_TIMEOUT) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            raise VersionCheckError(
                f"GitHub API returned status: {exc.code} {exc.reason}"
            ) from exc
        except (urllib.error.URLError, OSError) as exc:
            raise VersionCheckError(f"error sending request: {exc}") from exc
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise VersionCheckError(f"error decoding response body: {exc}") from exc
        if not isinstance(data, dict):
            raise VersionCheckError("error decoding response body: expected an object")
        return GitHubRelease.from_dict(data)

    async def check_latest_version(self) -> GitHubRelease:
        return await asyncio.to_thread(self._fetch)


def _update_message(release: GitHubRelease, info: VersionInfo) -> str:
    return (
        f"🚀 New version {release.tag_name} available! "
        f"Current: {info.current_version} → Release: {release.html_url}"
    )


async def version_checker_task(
    version_checker: VersionCheckable,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
) -> None:
    """Run the checker with the default daily interval."""
    await version_checker_task_with_interval(
        version_checker, events, shutdown, VERSION_CHECK_INTERVAL
    )


async def version_checker_task_with_interval(
    version_checker: VersionCheckable,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
    check_interval: float,
) -> None:
    """Check once now, then every ``check_interval`` seconds until shutdown.

    Update notices after the first are only sent when an update newly appears.
    """
    info = VersionInfo(version_checker.current_version)

    try:
        release = await version_checker.check_latest_version()
    except Exception as exc:  # noqa: BLE001 - any failure is reported as an event
        await events.put(
            VersionEvent(
                f"Failed to check for updates: {exc}", EventType.ERROR, LogLevel.DEBUG
            )
        )
    else:
        info.update_from_release(release)
        if info.update_available:
            await events.put(
                VersionEvent(
                    _update_message(release, info), EventType.SUCCESS, LogLevel.INFO
                )
            )
        else:
            await events.put(
                VersionEvent(
                    f"✅ Version {info.current_version} is up to date\n",
                    EventType.REFRESH,
                    LogLevel.DEBUG,
                )
            )

    last_check = time.monotonic()
    while True:
        try:
            await asyncio.wait_for(shutdown.wait(), timeout=_POLL_INTERVAL)
            break
        except asyncio.TimeoutError:
            pass

        if time.monotonic() - last_check < check_interval:
            continue
        last_check = time.monotonic()

        try:
            release = await version_checker.check_latest_version()
        except Exception as exc:  # noqa: BLE001
            await events.put(
                VersionEvent(
                    f"Failed to check for updates: {exc}",
                    EventType.ERROR,
                    LogLevel.DEBUG,
                )
            )
            continue

        was_available = info.update_available
        info.update_from_release(release)
        if info.update_available and not was_available:
            await events.put(
                VersionEvent(
                    _update_message(release, info), EventType.SUCCESS, LogLevel.INFO
                )
            )


async def start_version_checker_task(
    current_version: str,
    events: asyncio.Queue,
    shutdown: asyncio.Event,
) -> None:
    """Run the background check against the real release API."""
    await version_checker_task(VersionChecker(current_version), events, shutdown)