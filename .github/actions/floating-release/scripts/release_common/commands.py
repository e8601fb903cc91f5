r"""Helpers for running plumbum command invocations.

Each invocation is echoed before execution so the CI log shows exactly which
``git`` and ``gh`` commands ran.

Examples
--------
>>> from plumbum import local
>>> run_cmd(local["echo"]["hello"])  # doctest: +SKIP
$ /usr/bin/echo hello
'hello'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import typer
from plumbum.commands import CommandNotFound, ProcessExecutionError

__all__ = ["SupportsFormulate", "describe_failure", "run_cmd"]


@typ.runtime_checkable
class SupportsFormulate(typ.Protocol):
    """Objects that expose a shell representation via ``formulate``."""

    def formulate(self) -> cabc.Sequence[str]:  # pragma: no cover - protocol
        ...

    def __call__(self, *args: object, **kwargs: object) -> object:  # pragma: no cover
        ...


def _ensure_text(value: str | bytes | None) -> str:
    """Return ``value`` as ``str`` replacing undecodable bytes."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def run_cmd(cmd: object) -> str:
    """Echo and execute ``cmd``, returning its stripped standard output.

    Raises
    ------
    TypeError
        If ``cmd`` is not a plumbum command invocation.
    ProcessExecutionError
        If the command exits with a non-zero status.
    CommandNotFound
        If the executable is not available in ``PATH``.
    """
    if not isinstance(cmd, SupportsFormulate):
        msg = "run_cmd requires a plumbum command invocation"
        raise TypeError(msg)

    typer.echo(f"$ {cmd}")
    return _ensure_text(typ.cast("str | bytes | None", cmd())).strip()


def describe_failure(exc: ProcessExecutionError | CommandNotFound) -> str:
    """Return a one-line diagnostic for a failed command."""
    if isinstance(exc, CommandNotFound):
        return f"command not found: {exc.program}"
    stderr = " ".join(_ensure_text(getattr(exc, "stderr", "")).split())
    detail = f"exit status {exc.retcode}"
    return f"{detail}: {stderr}" if stderr else detail
