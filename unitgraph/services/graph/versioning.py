"""Version resolution for one evaluation."""

from __future__ import annotations

from datetime import datetime

SNAPSHOT_VERSION = "1.0.0-SNAPSHOT"
RELEASE_VERSION_FORMAT = "%Y%m%d%H%M"


def resolve_version(release: bool, now: datetime | None = None) -> str:
    """
    Resolve the version string.

    Release builds are stamped with the build time down to the minute
    (``yyyyMMddHHmm``); everything else is the fixed snapshot version.

    Args:
        release: Whether this is a release build
        now: Build time; defaults to the current local time

    Returns:
        Version string
    """
    if not release:
        return SNAPSHOT_VERSION
    return (now or datetime.now()).strftime(RELEASE_VERSION_FORMAT)
