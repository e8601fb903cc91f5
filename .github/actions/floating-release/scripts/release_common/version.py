"""Semantic version parsing for release tags.

Versions follow the SemVer 2.0 grammar with a mandatory leading ``v``, as in
``v1.2.3``, ``v0.9.0-beta.1`` or ``v2.0.0+build.7``.
"""

from __future__ import annotations

import dataclasses as dc
import re

from .errors import VersionError

__all__ = ["Version", "parse_version"]

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_IDENT = r"(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_IDENT = r"[0-9A-Za-z-]+"

_VERSION_PATTERN = re.compile(
    rf"v(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_IDENT}(?:\.{_PRERELEASE_IDENT})*))?"
    rf"(?:\+(?P<build>{_BUILD_IDENT}(?:\.{_BUILD_IDENT})*))?"
)


@dc.dataclass(frozen=True)
class Version:
    """Decomposed semantic version."""

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""
    text: str = ""

    @property
    def is_prerelease(self) -> bool:
        """Return ``True`` when the version carries a prerelease label."""
        return bool(self.prerelease)

    @property
    def major_component(self) -> str:
        """Return the floating major alias, e.g. ``v1``."""
        return f"v{self.major}"

    @property
    def major_minor_component(self) -> str:
        """Return the floating major.minor alias, e.g. ``v1.2``."""
        return f"v{self.major}.{self.minor}"

    def __str__(self) -> str:
        return self.text


def parse_version(text: str) -> Version:
    """Parse ``text`` into a :class:`Version`.

    Parameters
    ----------
    text
        Version string such as ``v1.2.3-rc.1``.

    Returns
    -------
    Version
        The decomposed version. ``text`` is preserved verbatim, build metadata
        included.

    Raises
    ------
    VersionError
        If ``text`` is not a valid semantic version with a leading ``v``.

    Examples
    --------
    >>> parse_version("v1.2.3").major_minor_component
    'v1.2'
    >>> parse_version("v0.9.0-beta.1").is_prerelease
    True
    """
    match = _VERSION_PATTERN.fullmatch(text)
    if match is None:
        msg = f"invalid version {text!r}"
        raise VersionError(msg)
    return Version(
        major=int(match["major"]),
        minor=int(match["minor"]),
        patch=int(match["patch"]),
        prerelease=match["prerelease"] or "",
        build=match["build"] or "",
        text=text,
    )
