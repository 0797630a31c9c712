"""Package generation.

Turns a ``PackageDescriptor`` into a package directory under
``packages/<vendor>/<package>``:

1. Preflight -- the skeleton and its template files exist, and the root
   manifest is a JSON object whose ``repositories`` (if any) is a list.
2. Materialise -- copy the skeleton, rewrite placeholder tokens, remove the
   skeleton's own ``README.md`` and ``.git`` directory.
3. Register -- append a ``path`` repository to the root ``composer.json``.

Quick usage::

    from package_designer.config import Config
    from package_designer.scaffolder import PackageDescriptor, PackageGenerator

    descriptor = PackageDescriptor(name="acme/billing")
    PackageGenerator(Config()).generate(descriptor)
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Any

from rich.markup import escape

from package_designer.config import Config
from package_designer.errors import ManifestError, PackageExistsError, SkeletonError
from package_designer.scaffolder.descriptor import PackageDescriptor
from package_designer.scaffolder.substitutions import TEMPLATE_FILES, replace_literals
from package_designer.utils import console, load_json, remove_directory, save_json

# Skeleton provenance artifacts that must not ship with a generated package.
SKELETON_README = "README.md"
SKELETON_VCS_DIR = ".git"


class PackageGenerator:
    """Generates a package from the skeleton and registers it.

    Attributes:
        config: Paths and skeleton placeholder tokens.
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    # -- Public API --------------------------------------------------------

    def generate(self, descriptor: PackageDescriptor) -> Path:
        """Run preflight, materialise the package and register it.

        Returns:
            Path of the generated package directory.

        Raises:
            SkeletonError: The skeleton or a template file is missing.
            ManifestError: The root manifest is missing or malformed.
            PackageExistsError: The target directory already exists.
        """
        self.preflight()
        package_path = self.materialize(descriptor)
        self.register_local_repository(descriptor)
        return package_path

    def preflight(self) -> None:
        """Check the skeleton and root manifest before anything is written."""
        skeleton_path = self.config.skeleton_path
        if not skeleton_path.is_dir():
            raise SkeletonError(f"Skeleton directory not found: {skeleton_path}")

        missing = [
            relative for relative in TEMPLATE_FILES
            if not (skeleton_path / relative).is_file()
        ]
        if missing:
            raise SkeletonError(
                f"Skeleton {skeleton_path} is missing template files: {', '.join(missing)}"
            )

        if not self.config.manifest_path.is_file():
            raise ManifestError(f"Root manifest not found: {self.config.manifest_path}")
        self._load_manifest()

    def materialize(self, descriptor: PackageDescriptor) -> Path:
        """Create the package directory from the skeleton.

        Sets ``descriptor.path`` once the directory has been created.

        Raises:
            PackageExistsError: The target directory already exists.  Nothing
                is created in that case.
        """
        package_path = self._make_directory(descriptor)

        for relative in TEMPLATE_FILES:
            self._rewrite_template(package_path, relative, descriptor)

        self._delete_skeleton_artifacts(package_path)
        return package_path

    def register_local_repository(self, descriptor: PackageDescriptor) -> dict[str, str]:
        """Append a ``path`` repository for the package to the root manifest.

        Existing entries are kept as-is and in order; no duplicate check is
        made.

        Returns:
            The appended repository entry.
        """
        if descriptor.path is None:
            raise ValueError(f"Package {descriptor.name} has not been materialised")

        manifest = self._load_manifest()
        entry = {"type": "path", "url": self._repository_url(descriptor.path)}
        manifest.setdefault("repositories", []).append(entry)

        manifest_path = self.config.manifest_path
        save_json(manifest, manifest_path, indent=self.config.manifest_indent)
        console.print(
            f"[green]Registered:[/green] {escape(entry['url'])} in {escape(manifest_path.name)}"
        )
        return entry

    # -- Internal helpers --------------------------------------------------

    def _load_manifest(self) -> dict[str, Any]:
        """Read the root manifest and check that ``repositories`` can be extended.

        Raises:
            ManifestError: The root is not an object, or ``repositories`` is
                present but not a list.
            json.JSONDecodeError: The manifest is not valid JSON.
        """
        manifest_path = self.config.manifest_path
        manifest = load_json(manifest_path)

        repositories = manifest.get("repositories", [])
        if not isinstance(repositories, list):
            raise ManifestError(
                f"'repositories' in {manifest_path} must be a list, "
                f"got {type(repositories).__name__}"
            )
        return manifest

    def _make_directory(self, descriptor: PackageDescriptor) -> Path:
        """Create the package directory and copy the skeleton into it."""
        package_path = self.config.package_path(descriptor.vendor, descriptor.package)
        if package_path.exists():
            raise PackageExistsError(package_path)

        package_path.mkdir(mode=0o755, parents=True)
        descriptor.path = package_path
        console.print(f"[green]Created:[/green] {escape(str(package_path))}/")

        shutil.copytree(self.config.skeleton_path, package_path, dirs_exist_ok=True)
        console.print(f"[green]Copied:[/green] {escape(str(self.config.skeleton_path))}/")
        return package_path

    def _rewrite_template(
        self, package_path: Path, relative: str, descriptor: PackageDescriptor
    ) -> None:
        """Apply the replacement table of *relative* to the copied file."""
        file_path = package_path / relative
        replacements = TEMPLATE_FILES[relative](self.config.skeleton, descriptor)

        content = file_path.read_text(encoding="utf-8")
        file_path.write_text(replace_literals(content, replacements), encoding="utf-8")
        console.print(f"[green]Rewrote:[/green] {relative}")

    def _delete_skeleton_artifacts(self, package_path: Path) -> None:
        readme = package_path / SKELETON_README
        if readme.is_file():
            readme.unlink()
            console.print(f"[green]Removed:[/green] {SKELETON_README}")

        vcs_dir = package_path / SKELETON_VCS_DIR
        if vcs_dir.is_dir():
            remove_directory(vcs_dir)
            console.print(f"[green]Removed:[/green] {SKELETON_VCS_DIR}/")

    def _repository_url(self, package_path: Path) -> str:
        """Path of the package relative to the manifest's directory.

        Packages under the monorepo root get a ``./`` prefix; packages
        elsewhere get a ``../`` style relative path.
        """
        relative = Path(
            os.path.relpath(package_path.resolve(), self.config.manifest_path.parent.resolve())
        ).as_posix()
        if relative.startswith("../"):
            return relative
        return f"./{relative}"
