"""Parsing of ``directory/version`` tag references."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc

from .errors import FormatError
from .version import Version, parse_version

__all__ = ["TagReference", "parse_ref"]


@dc.dataclass(frozen=True)
class TagReference:
    """Tag naming a directory and the version to release from it."""

    directory: str
    version: Version

    def release_id(self, component: str) -> str:
        """Return the release identifier for a version ``component``."""
        return f"{self.directory}/{component}"

    def __iter__(self) -> cabc.Iterator[str]:
        yield self.directory
        yield self.version.text

    def __str__(self) -> str:
        return self.release_id(self.version.text)


def parse_ref(ref: str) -> TagReference:
    """Split ``ref`` into its directory and version parts.

    Parameters
    ----------
    ref
        Tag name such as ``checktypes/v1.2.3``.

    Returns
    -------
    TagReference
        The parsed reference. Unpacking it yields ``(directory, version)``
        as strings.

    Raises
    ------
    FormatError
        If ``ref`` does not contain exactly one ``/`` separating two non-empty
        parts.
    VersionError
        If the version part is not a valid semantic version.

    Examples
    --------
    >>> tuple(parse_ref("checktypes/v1.2.3"))
    ('checktypes', 'v1.2.3')
    """
    parts = ref.split("/")
    if len(parts) != 2 or not all(parts):
        msg = f"invalid tag name {ref!r}"
        raise FormatError(msg)

    directory, version = parts
    return TagReference(directory=directory, version=parse_version(version))
