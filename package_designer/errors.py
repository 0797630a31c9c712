"""Exceptions raised by the package designer.

Every error that the ``make-package`` command knows how to report derives
from :class:`PackageDesignerError`.  Anything else (permission problems,
malformed JSON, ...) propagates and aborts the process.
"""

from __future__ import annotations

from pathlib import Path


class PackageDesignerError(Exception):
    """Base class for reportable package designer failures."""


class PackageExistsError(PackageDesignerError):
    """Raised when the target package directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"This package already exists: {path}")


class SkeletonError(PackageDesignerError):
    """Raised when the skeleton directory or a template file is missing."""


class ManifestError(PackageDesignerError):
    """Raised when the root manifest cannot be patched."""
