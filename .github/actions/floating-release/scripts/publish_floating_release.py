#!/usr/bin/env -S uv run --script
# fmt: off
# /// script
# requires-python = ">=3.12"
# dependencies = [
#   "cyclopts>=3.24,<4.0",
#   "plumbum>=1.8,<2.0",
#   "syspath-hack>=0.4.0,<0.5.0",
#   "typer>=0.12",
# ]
# ///
# fmt: on

"""Publish floating GitHub releases for a ``directory/semver`` tag.

For ``checktypes/v1.2.3`` the releases ``checktypes/v1`` and
``checktypes/v1.2`` are recreated and ``checktypes/v1.2.3`` is created, all
pointing at the tagged commit with the regular files of ``checktypes/``
attached. Prerelease tags only create the exact release.

Examples
--------
Publish the releases for the tag that triggered the workflow::

    GITHUB_REF_NAME=checktypes/v1.2.3 uv run publish_floating_release.py

Print the ``gh`` invocations without publishing anything::

    INPUT_DRY_RUN=true GITHUB_REF_NAME=checktypes/v1.2.3 \
        uv run publish_floating_release.py
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import math
import os
import sys
import time
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from syspath_hack import prepend_to_syspath

# Add script directory to path for release_common import
_SCRIPT_DIR = Path(__file__).resolve().parent
prepend_to_syspath(_SCRIPT_DIR)

from release_common import (
    DEFAULT_SETTLE_DELAY,
    DryRunReleaseHost,
    GhReleaseHost,
    ReleaseError,
    run_release,
    write_output,
)

if typ.TYPE_CHECKING:
    from release_common import ReleaseHost

REF_ENV_VAR = "GITHUB_REF_NAME"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

app: App = App(
    help="Publish floating GitHub releases for a dir/semver tag.",
    config=cyclopts.config.Env("INPUT_", command=False),
)


def _normalize_input_env(prefix: str = "INPUT_") -> None:
    """Rename dashed action inputs to the names cyclopts looks up.

    The runner exports ``with:`` inputs verbatim, so ``settle-delay`` arrives
    as ``INPUT_SETTLE-DELAY`` whenever the script runs outside the composite
    wrapper in ``action.yml``. A non-empty underscored variable takes
    precedence over its dashed spelling.
    """
    dashed = [key for key in os.environ if key.startswith(prefix) and "-" in key]
    for key in dashed:
        value = os.environ.pop(key)
        underscored = key.replace("-", "_")
        if not os.environ.get(underscored):
            os.environ[underscored] = value


def _coerce_bool(value: object, *, default: bool) -> bool:
    """Interpret GitHub input values as booleans.

    GitHub Actions forwards inputs as strings, so several spellings are
    accepted. ``None`` or empty strings fall back to ``default``.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if not normalised:
            return default
        if normalised in _TRUTHY:
            return True
        if normalised in _FALSY:
            return False
    msg = f"Cannot interpret {value!r} as boolean"
    raise ValueError(msg)


def _configure_logging() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)


def _report_failure(title: str, exc: Exception) -> int:
    print(f"::error title={title}::{exc}", file=sys.stderr)
    write_output("releases", "")
    write_output("publish_error", "true")
    write_output("error_message", str(exc))
    return 1


def main(
    ref_name: str | None,
    *,
    settle_delay: float = DEFAULT_SETTLE_DELAY,
    dry_run: bool = False,
    host: ReleaseHost | None = None,
    sleep: cabc.Callable[[float], object] = time.sleep,
) -> int:
    """Entry point shared by the CLI and tests.

    Parameters
    ----------
    ref_name
        Tag reference such as ``checktypes/v1.2.3``.
    settle_delay
        Seconds to wait after deleting a floating alias before recreating it.
    dry_run
        When ``True``, print the ``gh`` invocations without running them and
        skip the settling wait.
    host
        Release backend override; defaults to ``gh`` (or the dry-run printer).
    sleep
        Callable used for the settling wait.

    Returns
    -------
    int
        Exit code: ``0`` when every release was published, ``1`` otherwise.
    """
    if not ref_name:
        return _report_failure(
            "Missing Tag", ValueError(f"missing env var {REF_ENV_VAR}")
        )
    if not math.isfinite(settle_delay) or settle_delay < 0:
        msg = f"settle-delay must be a finite, non-negative number, got {settle_delay}"
        return _report_failure("Invalid Input", ValueError(msg))

    if host is None:
        host = DryRunReleaseHost() if dry_run else GhReleaseHost()
    if dry_run:
        settle_delay = 0.0

    try:
        result = run_release(
            ref_name, host=host, settle_delay=settle_delay, sleep=sleep
        )
    except ReleaseError as exc:
        return _report_failure(type(exc).__name__, exc)

    write_output("releases", " ".join(result.published))
    write_output("target", result.target)
    write_output("publish_error", "false")
    write_output("error_message", "")
    print(f"Published {len(result.published)} release(s) for {result.ref}")
    return 0


@app.default
def cli(
    *,
    ref_name: typ.Annotated[str | None, Parameter(env_var=REF_ENV_VAR)] = None,
    settle_delay: float = DEFAULT_SETTLE_DELAY,
    dry_run: str = "false",
) -> None:
    """Publish the floating and exact releases for a dir/semver tag.

    Parameters
    ----------
    ref_name
        Tag reference; read from ``GITHUB_REF_NAME`` inside GitHub Actions.
    settle_delay
        Seconds to wait after deleting a floating alias.
    dry_run
        Print the ``gh`` invocations without publishing. Accepts the usual
        GitHub input spellings such as ``true``, ``yes`` or ``0``.
    """
    _configure_logging()
    try:
        dry_run_flag = _coerce_bool(dry_run, default=False)
    except ValueError as exc:
        raise SystemExit(_report_failure("Invalid Input", exc)) from exc
    exit_code = main(ref_name, settle_delay=settle_delay, dry_run=dry_run_flag)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    _normalize_input_env()
    app()
