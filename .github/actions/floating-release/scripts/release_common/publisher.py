"""Sequential publishing of a release set."""

from __future__ import annotations

import collections.abc as cabc
import logging
import time
import typing as typ

from .errors import PublishError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .host import ReleaseHost
    from .releases import PlannedRelease

__all__ = ["DEFAULT_SETTLE_DELAY", "publish", "publish_all"]

logger = logging.getLogger(__name__)

# Recreating a release right after deleting it can leave the new release stuck
# as a draft on GitHub (https://github.com/cli/cli/issues/8458).
DEFAULT_SETTLE_DELAY = 30.0


def publish(  # noqa: PLR0913
    host: ReleaseHost,
    release_id: str,
    target: str,
    *,
    update: bool,
    attachments: cabc.Sequence[Path],
    settle_delay: float = DEFAULT_SETTLE_DELAY,
    sleep: cabc.Callable[[float], object] = time.sleep,
) -> None:
    """Publish a single release.

    Parameters
    ----------
    host
        Backend that stores the release.
    release_id
        Identifier such as ``checktypes/v1.2``.
    target
        Commit hash the release points to.
    update
        When ``True`` the release is a floating alias: any existing release is
        deleted first and ``settle_delay`` seconds elapse before it is
        recreated. A failed deletion is only a warning because the alias may
        not exist yet.
    attachments
        Files uploaded with the release.
    settle_delay
        Seconds to wait between deletion and creation.
    sleep
        Callable used to wait; tests substitute a recorder.

    Raises
    ------
    PublishError
        If the release cannot be created.
    """
    if update:
        try:
            host.delete_release(release_id)
        except PublishError as exc:
            logger.warning(
                "::warning title=Release Not Deleted::could not delete release "
                "'%s': %s",
                release_id,
                exc,
            )
        sleep(settle_delay)

    host.create_release(release_id, target, attachments)


def publish_all(  # noqa: PLR0913
    host: ReleaseHost,
    plan: cabc.Iterable[PlannedRelease],
    target: str,
    attachments: cabc.Sequence[Path],
    *,
    settle_delay: float = DEFAULT_SETTLE_DELAY,
    sleep: cabc.Callable[[float], object] = time.sleep,
) -> list[str]:
    """Publish every release in ``plan`` in order, stopping at the first failure.

    Releases published before a failure are left in place.

    Returns
    -------
    list[str]
        Identifiers of the published releases.

    Raises
    ------
    PublishError
        If any release cannot be created. The message names the release.
    """
    published: list[str] = []
    for planned in plan:
        mode = "update" if planned.update else "create"
        logger.info("Publishing %s (%s)", planned.release_id, mode)
        try:
            publish(
                host,
                planned.release_id,
                target,
                update=planned.update,
                attachments=attachments,
                settle_delay=settle_delay,
                sleep=sleep,
            )
        except PublishError as exc:
            msg = f"create GitHub release {planned.release_id!r}: {exc}"
            raise PublishError(msg) from exc
        published.append(planned.release_id)
    return published
