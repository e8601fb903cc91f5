"""Error types shared across the floating release helpers."""

from __future__ import annotations


class ReleaseError(RuntimeError):
    """Raised when the release run cannot continue."""


class FormatError(ReleaseError):
    """Raised when a tag reference is not shaped like ``directory/version``."""


class VersionError(ReleaseError):
    """Raised when the version part of a tag is not a semantic version."""


class DirectoryError(ReleaseError):
    """Raised when the attachment directory cannot be read."""


class VCSError(ReleaseError):
    """Raised when the commit behind a tag cannot be resolved."""


class PublishError(ReleaseError):
    """Raised when the hosting service rejects a release operation."""
