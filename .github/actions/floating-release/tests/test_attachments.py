"""Tests for attachment discovery."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import pytest
from release_common import DirectoryError, list_files


def test_lists_regular_files_prefixed_with_directory(tmp_path: Path) -> None:
    """Files are returned as ``directory/name`` paths."""
    (tmp_path / "b.bin").write_text("b", encoding="utf-8")
    (tmp_path / "a.bin").write_text("a", encoding="utf-8")

    files = list_files(tmp_path)

    assert files == [tmp_path / "a.bin", tmp_path / "b.bin"]


def test_relative_directory_keeps_relative_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A relative directory name yields relative attachment paths."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "tools").mkdir()
    (tmp_path / "tools" / "a.bin").write_text("a", encoding="utf-8")

    assert list_files("tools") == [Path("tools/a.bin")]


def test_skips_subdirectories_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Subdirectories are never attached and are reported as warnings."""
    (tmp_path / "a.bin").write_text("a", encoding="utf-8")
    (tmp_path / "extra").mkdir()
    (tmp_path / "extra" / "nested.bin").write_text("n", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        files = list_files(tmp_path)

    assert files == [tmp_path / "a.bin"]
    assert "skipping dir 'extra'" in caplog.text
    assert "::warning" in caplog.text


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
def test_skips_broken_symlinks_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Dangling symlinks cannot be uploaded and are skipped."""
    (tmp_path / "a.bin").write_text("a", encoding="utf-8")
    (tmp_path / "dangling").symlink_to(tmp_path / "missing.bin")

    with caplog.at_level(logging.WARNING):
        files = list_files(tmp_path)

    assert files == [tmp_path / "a.bin"]
    assert "skipping non-regular file 'dangling'" in caplog.text


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes unsupported")
def test_skips_named_pipes_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Special files such as FIFOs are never attached."""
    (tmp_path / "a.bin").write_text("a", encoding="utf-8")
    os.mkfifo(tmp_path / "pipe")

    with caplog.at_level(logging.WARNING):
        files = list_files(tmp_path)

    assert files == [tmp_path / "a.bin"]
    assert "skipping non-regular file 'pipe'" in caplog.text


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
def test_symlinked_files_are_attached(tmp_path: Path) -> None:
    """A symlink to a regular file is attached like the file itself."""
    (tmp_path / "a.bin").write_text("a", encoding="utf-8")
    (tmp_path / "latest.bin").symlink_to(tmp_path / "a.bin")

    assert list_files(tmp_path) == [tmp_path / "a.bin", tmp_path / "latest.bin"]


def test_empty_directory_yields_no_files(tmp_path: Path) -> None:
    """An empty directory is valid and produces no attachments."""
    assert list_files(tmp_path) == []


def test_missing_directory_raises(tmp_path: Path) -> None:
    """A missing directory raises DirectoryError."""
    with pytest.raises(DirectoryError, match="read dir"):
        list_files(tmp_path / "missing")


def test_file_instead_of_directory_raises(tmp_path: Path) -> None:
    """Naming a regular file raises DirectoryError."""
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")

    with pytest.raises(DirectoryError):
        list_files(target)


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced",
)
def test_unreadable_directory_raises(tmp_path: Path) -> None:
    """A directory without read permission raises DirectoryError."""
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        with pytest.raises(DirectoryError):
            list_files(locked)
    finally:
        locked.chmod(0o755)
