"""Shared fixtures for the ``floating-release`` action tests."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
from pathlib import Path

import pytest
from syspath_hack import prepend_to_syspath

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"
prepend_to_syspath(SCRIPTS_DIR)

from release_common import PublishError


@dc.dataclass
class FakeReleaseHost:
    """In-memory release host that mirrors the GitHub CLI semantics.

    Creating a release that already exists fails, deleting a missing release
    fails, and every operation is journalled in ``calls``.
    """

    releases: dict[str, tuple[str, list[Path]]] = dc.field(default_factory=dict)
    calls: list[tuple[str, str]] = dc.field(default_factory=list)
    fail_create: set[str] = dc.field(default_factory=set)

    def delete_release(self, release_id: str) -> None:
        self.calls.append(("delete", release_id))
        if release_id not in self.releases:
            msg = f"release not found: {release_id}"
            raise PublishError(msg)
        del self.releases[release_id]

    def create_release(
        self, release_id: str, target: str, attachments: cabc.Sequence[Path]
    ) -> None:
        self.calls.append(("create", release_id))
        if release_id in self.fail_create:
            msg = f"HTTP 422: refusing to create {release_id}"
            raise PublishError(msg)
        if release_id in self.releases:
            msg = f"a release with tag {release_id} already exists"
            raise PublishError(msg)
        self.releases[release_id] = (target, list(attachments))


class SleepRecorder:
    """Stand-in for :func:`time.sleep` that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def host() -> FakeReleaseHost:
    """Return an empty in-memory release host."""
    return FakeReleaseHost()


@pytest.fixture
def sleep() -> SleepRecorder:
    """Return a sleep recorder so tests never wait."""
    return SleepRecorder()


@pytest.fixture
def release_tree(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> cabc.Callable[..., Path]:
    """Return a factory creating an attachment directory inside ``tmp_path``.

    The working directory is switched to ``tmp_path`` so that the directory
    named by the tag resolves relative to it, as it does in a checkout.
    """
    monkeypatch.chdir(tmp_path)

    def _create(
        directory: str,
        files: cabc.Iterable[str] = (),
        subdirs: cabc.Iterable[str] = (),
    ) -> Path:
        root = tmp_path / directory
        root.mkdir()
        for name in files:
            (root / name).write_text(name, encoding="utf-8")
        for name in subdirs:
            (root / name).mkdir()
        return root

    return _create


@pytest.fixture(autouse=True)
def _no_github_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests from writing to a real ``GITHUB_OUTPUT`` file."""
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
