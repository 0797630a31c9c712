"""Interactive collection of package information.

Asks for the package name (unless given on the command line), description,
author and namespace, shows a summary and asks for confirmation.  An invalid
name or a declined confirmation restarts the whole questionnaire.
"""

from __future__ import annotations

from typing import Optional

from rich.prompt import Confirm, Prompt

from package_designer.scaffolder.descriptor import (
    PackageDescriptor,
    default_namespace,
    is_valid_package_name,
)
from package_designer.utils import console, kebab_case, print_error, print_summary_table

SUMMARY_COLUMNS = ["Name", "Description", "Author", "Email", "Namespace"]


def collect_descriptor(name: Optional[str] = None) -> PackageDescriptor:
    """Ask the user for package information until it is valid and confirmed.

    Args:
        name: Package name from the command line.  Only used for the first
            attempt; later attempts always prompt for it.

    Returns:
        The confirmed descriptor.  ``path`` is not set yet.
    """
    while True:
        descriptor = ask_package_information(name)
        if descriptor is not None:
            return descriptor
        name = None


def ask_package_information(name: Optional[str] = None) -> Optional[PackageDescriptor]:
    """Run the questionnaire once.

    Returns:
        The descriptor, or ``None`` if the name was rejected or the user did
        not confirm the summary.
    """
    if not name:
        name = Prompt.ask(
            "[green]What is the package name? (e.g. vendor/package)[/green]",
            console=console,
            default="",
            show_default=False,
        )

    package_name = kebab_case(name or "")
    if not package_name:
        print_error("You must specify a package name")
        return None
    if not is_valid_package_name(package_name):
        print_error("You must use only alphanumeric characters")
        return None

    vendor, package = package_name.split("/")

    description = _ask("Description")
    author_name = _ask("Author name (e.g. John Smith)")
    author_email = _ask("Author email (e.g. john@smith.com)")
    namespace = Prompt.ask(
        "Namespace",
        console=console,
        default=default_namespace(vendor, package),
    )

    descriptor = PackageDescriptor(
        name=package_name,
        description=description,
        author_name=author_name,
        author_email=author_email,
        namespace=namespace,
    )

    print_summary_table(SUMMARY_COLUMNS, descriptor.summary_row())

    if not Confirm.ask("Is this information correct?", console=console, default=True):
        return None
    return descriptor


def _ask(question: str) -> str:
    """Free-text prompt that accepts an empty answer."""
    return Prompt.ask(question, console=console, default="", show_default=False)
