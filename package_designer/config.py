"""Package designer configuration.

Typed settings for the ``make-package`` command.  All settings use Pydantic
v2 models so they are validated at construction time and can be loaded from
a JSON file or from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class SkeletonConfig(BaseModel):
    """Placeholder tokens carried by the skeleton package.

    Each value is a literal that appears verbatim in the skeleton's template
    files and is replaced with the matching descriptor value.
    """

    name: str = Field(default="uccello/package-skeleton")
    namespace: str = Field(default="Uccello\\PackageSkeleton")
    slug: str = Field(default="package-skeleton")
    description: str = Field(default="Package skeleton for Uccello")
    author_name: str = Field(default="Jonathan SARDO")
    author_email: str = Field(default="jonathan@uccellolabs.com")


class Config(BaseModel):
    """Global package designer configuration.

    Paths are stored relative to ``root_dir`` (the monorepo root) and exposed
    as resolved properties.
    """

    root_dir: Path = Field(default=Path("."))
    packages_dir: str = Field(default="packages")
    skeleton_dir: str = Field(default="vendor/uccello/package-skeleton")
    manifest_file: str = Field(default="composer.json")
    manifest_indent: int = Field(default=4, ge=0, description="Indent of the rewritten manifest")
    skeleton: SkeletonConfig = Field(default_factory=SkeletonConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def packages_path(self) -> Path:
        """Directory holding every generated ``<vendor>/<package>``."""
        return self.root_dir / self.packages_dir

    @property
    def skeleton_path(self) -> Path:
        """Skeleton template tree copied into each new package."""
        return self.root_dir / self.skeleton_dir

    @property
    def manifest_path(self) -> Path:
        """Root ``composer.json``."""
        return self.root_dir / self.manifest_file

    def package_path(self, vendor: str, package: str) -> Path:
        return self.packages_path / vendor / package

    # ------------------------------------------------------------------
    # Loading helpers
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration from JSON.

        Args:
            path: The JSON file to read.

        Returns:
            A validated ``Config`` instance.
        """
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PACKAGE_DESIGNER_ROOT, PACKAGE_DESIGNER_PACKAGES_DIR,
            PACKAGE_DESIGNER_SKELETON_DIR, PACKAGE_DESIGNER_MANIFEST.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("PACKAGE_DESIGNER_ROOT"):
            kwargs["root_dir"] = Path(os.environ["PACKAGE_DESIGNER_ROOT"])
        if os.environ.get("PACKAGE_DESIGNER_PACKAGES_DIR"):
            kwargs["packages_dir"] = os.environ["PACKAGE_DESIGNER_PACKAGES_DIR"]
        if os.environ.get("PACKAGE_DESIGNER_SKELETON_DIR"):
            kwargs["skeleton_dir"] = os.environ["PACKAGE_DESIGNER_SKELETON_DIR"]
        if os.environ.get("PACKAGE_DESIGNER_MANIFEST"):
            kwargs["manifest_file"] = os.environ["PACKAGE_DESIGNER_MANIFEST"]

        return cls(**kwargs)
