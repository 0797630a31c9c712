"""Command-line entry point for ``make-package``.

Usage::

    package-designer                  # ask for everything
    package-designer acme/billing     # ask for everything but the name
    package-designer --config designer.json acme/billing
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from rich.markup import escape

from package_designer.config import Config
from package_designer.errors import PackageDesignerError
from package_designer.scaffolder import PackageGenerator, collect_descriptor
from package_designer.utils import console, print_error, print_success


def make_package(config: Config, name: Optional[str] = None) -> bool:
    """Ask for package information, generate the package and register it.

    Returns:
        ``True`` if the package was created.
    """
    descriptor = collect_descriptor(name)
    generator = PackageGenerator(config)

    try:
        generator.generate(descriptor)
    except PackageDesignerError as exc:
        print_error(str(exc))
        print_error("Package not made")
        return False

    print_success("Package created!")
    console.print(
        f"You can install with [yellow]composer require {descriptor.name}[/yellow]"
    )
    return True


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="package-designer",
        description="Create a new package",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Package name (e.g. vendor/package)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (default: read PACKAGE_DESIGNER_* variables)",
    )

    args = parser.parse_args(argv)

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            console.print(f"[bold red]Error:[/bold red] Configuration file not found: {escape(str(config_path))}")
            sys.exit(1)
        config = Config.load(config_path)
    else:
        config = Config.from_env()

    try:
        created = make_package(config, args.name)
    except KeyboardInterrupt:
        console.print()
        print_error("Aborted")
        sys.exit(130)

    if not created:
        sys.exit(1)


if __name__ == "__main__":
    main()
