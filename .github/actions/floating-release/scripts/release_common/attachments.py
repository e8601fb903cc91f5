"""Discovery of the files attached to every release."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import DirectoryError

__all__ = ["list_files"]

logger = logging.getLogger(__name__)


def list_files(directory: str | Path) -> list[Path]:
    """Return the files directly inside ``directory``.

    Parameters
    ----------
    directory
        Directory named by the tag reference.

    Returns
    -------
    list[Path]
        Paths of the regular files prefixed with ``directory``, sorted by
        name. Symlinks to regular files count as files. Subdirectories, broken
        symlinks and special files are skipped with a warning; the listing is
        not recursive.

    Raises
    ------
    DirectoryError
        If the directory is missing, is not a directory, or cannot be read.
    """
    root = Path(directory)
    try:
        entries = sorted(root.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        msg = f"read dir {root}: {exc.strerror or exc}"
        raise DirectoryError(msg) from exc

    files: list[Path] = []
    for entry in entries:
        if entry.is_dir():
            logger.warning(
                "::warning title=Directory Skipped::skipping dir '%s'", entry.name
            )
            continue
        if not entry.is_file():
            logger.warning(
                "::warning title=Entry Skipped::skipping non-regular file '%s'",
                entry.name,
            )
            continue
        files.append(root / entry.name)
    return files
