"""End-to-end release flow for a single tag reference."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import time
import typing as typ

from .attachments import list_files
from .publisher import DEFAULT_SETTLE_DELAY, publish_all
from .ref import TagReference, parse_ref
from .releases import PlannedRelease, plan_releases
from .vcs import git_hash

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .host import ReleaseHost

__all__ = ["ReleaseResult", "run_release"]

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True)
class ReleaseResult:
    """Outcome of a successful release run."""

    ref: TagReference
    target: str
    plan: list[PlannedRelease]
    attachments: list[Path]
    published: list[str]


def run_release(  # noqa: PLR0913
    ref_name: str,
    *,
    host: ReleaseHost,
    settle_delay: float = DEFAULT_SETTLE_DELAY,
    sleep: cabc.Callable[[float], object] = time.sleep,
    resolve_commit: cabc.Callable[[str], str] | None = None,
) -> ReleaseResult:
    """Publish the release set for ``ref_name``.

    Parsing, attachment discovery and commit resolution all happen before the
    first release is touched, so their errors never leave a partial release
    set behind.

    Parameters
    ----------
    ref_name
        Tag reference such as ``checktypes/v1.2.3``.
    host
        Backend receiving the releases.
    settle_delay
        Seconds to wait after deleting a floating alias.
    sleep
        Callable used for the settling wait.
    resolve_commit
        Callable returning the commit hash of a tag; defaults to
        :func:`git_hash`.

    Raises
    ------
    ReleaseError
        Any of its subclasses, depending on the failing step.
    """
    ref = parse_ref(ref_name)
    attachments = list_files(ref.directory)
    target = (resolve_commit or git_hash)(ref_name)
    plan = plan_releases(ref)
    logger.info(
        "Releasing %s at %s with %d attachment(s)", ref, target, len(attachments)
    )
    published = publish_all(
        host,
        plan,
        target,
        attachments,
        settle_delay=settle_delay,
        sleep=sleep,
    )
    return ReleaseResult(
        ref=ref,
        target=target,
        plan=plan,
        attachments=attachments,
        published=published,
    )
