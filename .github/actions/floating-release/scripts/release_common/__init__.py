"""Helpers for publishing floating GitHub releases from ``dir/semver`` tags.

A tag such as ``checktypes/v1.2.3`` produces the releases ``checktypes/v1``,
``checktypes/v1.2`` and ``checktypes/v1.2.3``; the two aliases are recreated on
every stable release so consumers can pin to a version range.
"""

from __future__ import annotations

from .attachments import list_files
from .errors import (
    DirectoryError,
    FormatError,
    PublishError,
    ReleaseError,
    VCSError,
    VersionError,
)
from .host import DryRunReleaseHost, GhReleaseHost, ReleaseHost
from .output import write_output
from .pipeline import ReleaseResult, run_release
from .publisher import DEFAULT_SETTLE_DELAY, publish, publish_all
from .ref import TagReference, parse_ref
from .releases import PlannedRelease, derive_releases, plan_releases
from .vcs import git_hash
from .version import Version, parse_version

__all__ = [
    "DEFAULT_SETTLE_DELAY",
    "DirectoryError",
    "DryRunReleaseHost",
    "FormatError",
    "GhReleaseHost",
    "PlannedRelease",
    "PublishError",
    "ReleaseError",
    "ReleaseHost",
    "ReleaseResult",
    "TagReference",
    "VCSError",
    "Version",
    "VersionError",
    "derive_releases",
    "git_hash",
    "list_files",
    "parse_ref",
    "parse_version",
    "plan_releases",
    "publish",
    "publish_all",
    "run_release",
    "write_output",
]
