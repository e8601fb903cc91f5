"""Release hosting backends driven through the GitHub CLI."""

from __future__ import annotations

import collections.abc as cabc
import shlex
import typing as typ

from plumbum import local
from plumbum.commands import CommandNotFound, ProcessExecutionError

from .commands import describe_failure, run_cmd
from .errors import PublishError

if typ.TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "DryRunReleaseHost",
    "GhReleaseHost",
    "ReleaseHost",
    "create_args",
    "delete_args",
]


class ReleaseHost(typ.Protocol):
    """Service that stores releases and their attachments."""

    def delete_release(self, release_id: str) -> None:
        """Delete the release ``release_id`` and its tag."""
        ...

    def create_release(
        self, release_id: str, target: str, attachments: cabc.Sequence[Path]
    ) -> None:
        """Create ``release_id`` at ``target`` with ``attachments`` uploaded."""
        ...


def delete_args(release_id: str) -> list[str]:
    """Return the ``gh`` arguments deleting ``release_id``."""
    return ["release", "delete", "--cleanup-tag", "--yes", release_id]


def create_args(
    release_id: str, target: str, attachments: cabc.Sequence[Path]
) -> list[str]:
    """Return the ``gh`` arguments creating ``release_id``."""
    return [
        "release",
        "create",
        "--target",
        target,
        release_id,
        *(str(path) for path in attachments),
    ]


class GhReleaseHost:
    """Publish releases with ``gh release``.

    ``gh`` resolves the repository and credentials from the environment
    (``GH_TOKEN`` and ``GITHUB_REPOSITORY`` inside GitHub Actions).
    """

    def _gh(self, args: list[str]) -> None:
        try:
            run_cmd(local["gh"][args])
        except (ProcessExecutionError, CommandNotFound) as exc:
            msg = f"gh {' '.join(args[:2])}: {describe_failure(exc)}"
            raise PublishError(msg) from exc

    def delete_release(self, release_id: str) -> None:
        """Delete ``release_id`` together with its tag."""
        self._gh(delete_args(release_id))

    def create_release(
        self, release_id: str, target: str, attachments: cabc.Sequence[Path]
    ) -> None:
        """Create ``release_id`` pointing at ``target``."""
        self._gh(create_args(release_id, target, attachments))


class DryRunReleaseHost:
    """Print the ``gh`` invocations instead of running them."""

    def __init__(self) -> None:
        self.commands: list[list[str]] = []

    def _record(self, args: list[str]) -> None:
        self.commands.append(args)
        print(f"[dry-run] gh {shlex.join(args)}")

    def delete_release(self, release_id: str) -> None:
        """Record the deletion of ``release_id``."""
        self._record(delete_args(release_id))

    def create_release(
        self, release_id: str, target: str, attachments: cabc.Sequence[Path]
    ) -> None:
        """Record the creation of ``release_id``."""
        self._record(create_args(release_id, target, attachments))
