"""Commit resolution for release tags."""

from __future__ import annotations

from plumbum import local
from plumbum.commands import CommandNotFound, ProcessExecutionError

from .commands import describe_failure, run_cmd
from .errors import VCSError

__all__ = ["git_hash"]


def git_hash(ref: str) -> str:
    """Return the commit hash the tag ``ref`` points to.

    Uses ``git show-ref --tags --hash`` so only tags are considered.

    Raises
    ------
    VCSError
        If ``git`` fails, is missing, or does not resolve ``ref`` to exactly
        one hash.
    """
    try:
        output = run_cmd(local["git"]["show-ref", "--tags", "--hash", ref])
    except (ProcessExecutionError, CommandNotFound) as exc:
        msg = f"git show-ref {ref}: {describe_failure(exc)}"
        raise VCSError(msg) from exc

    hashes = output.split()
    if not hashes:
        msg = f"git show-ref {ref}: no matching tag"
        raise VCSError(msg)
    if len(hashes) > 1:
        msg = f"git show-ref {ref}: ambiguous reference ({len(hashes)} matches)"
        raise VCSError(msg)
    return hashes[0]
