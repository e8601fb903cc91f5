"""Derivation of the release set published for a tag."""

from __future__ import annotations

import dataclasses as dc

from .ref import TagReference
from .version import Version

__all__ = ["PlannedRelease", "derive_releases", "plan_releases"]


@dc.dataclass(frozen=True)
class PlannedRelease:
    """Release identifier together with its publishing mode."""

    release_id: str
    update: bool


def derive_releases(version: Version) -> list[str]:
    """Return the version components to publish for ``version``.

    Floating aliases are never produced for prereleases so that consumers
    pinned to ``vM`` or ``vM.m`` only ever receive stable patches.

    Examples
    --------
    >>> from release_common.version import parse_version
    >>> derive_releases(parse_version("v1.2.3"))
    ['v1', 'v1.2', 'v1.2.3']
    >>> derive_releases(parse_version("v1.2.3-rc.1"))
    ['v1.2.3-rc.1']
    """
    if version.is_prerelease:
        return [version.text]
    return [version.major_component, version.major_minor_component, version.text]


def plan_releases(ref: TagReference) -> list[PlannedRelease]:
    """Return the ordered release set for ``ref``.

    Every identifier other than the tag itself is a floating alias and is
    recreated; the exact release is only ever created.
    """
    tag = str(ref)
    plan: list[PlannedRelease] = []
    for component in derive_releases(ref.version):
        release_id = ref.release_id(component)
        plan.append(PlannedRelease(release_id=release_id, update=release_id != tag))
    return plan
