"""Shared utility functions for the package designer.

Provides Rich-based console output, JSON I/O for the root manifest, case
conversion helpers used to normalise package names and derive namespaces,
and a recursive directory removal helper.
"""

from __future__ import annotations

import json
import re
import shutil
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from package_designer.errors import ManifestError

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def kebab_case(value: str) -> str:
    """Convert a package name to kebab-case, one ``/`` segment at a time.

    * Splits camelCase and PascalCase boundaries with a hyphen.
    * Replaces whitespace and underscores with hyphens.
    * Lowercases the result.

    Examples::

        kebab_case("Acme/Billing") -> "acme/billing"
        kebab_case("MyOrg/coolThing") -> "my-org/cool-thing"
        kebab_case("my org/cool_thing") -> "my-org/cool-thing"
    """
    segments: list[str] = []
    for segment in value.strip().split("/"):
        result = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", segment.strip())
        result = re.sub(r"([A-Z])([A-Z][a-z])", r"\1-\2", result)
        result = re.sub(r"[\s_]+", "-", result)
        segments.append(result.lower())
    return "/".join(segments)


def studly_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``.

    Only the first letter of each word is uppercased; the rest is kept.
    """
    parts = re.split(r"[-_\s]+", value)
    return "".join(part[0].upper() + part[1:] for part in parts if part)


def json_escape(value: str) -> str:
    """Escape *value* for use inside a JSON string literal (no quotes)."""
    return json.dumps(value, ensure_ascii=False)[1:-1]


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file whose root is an object.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary, key order preserved.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ManifestError: If the top-level value is not an object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ManifestError(f"Expected a JSON object in {file_path}, got {type(data).__name__}")
    return data


def save_json(data: dict[str, Any] | list[Any], path: str | Path, indent: int = 4) -> None:
    """Save data as pretty-printed JSON, overwriting *path*.

    Args:
        data: Serialisable data (dict or list).
        path: Destination file path.
        indent: Number of spaces per nesting level.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=indent, ensure_ascii=False)
    file_path.write_text(content + "\n", encoding="utf-8")


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def remove_directory(path: str | Path) -> None:
    """Recursively delete a directory and everything inside it.

    A path that is not a directory (missing, or a plain file) is left alone.
    Filesystem errors propagate.
    """
    dir_path = Path(path)
    if not dir_path.is_dir():
        return
    shutil.rmtree(dir_path)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(columns: list[str], row: list[str], title: str | None = None) -> None:
    """Print a single-row table with one column per field.

    Args:
        columns: Column headers.
        row: Cell values, in the same order as *columns*.
        title: Optional table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for column in columns:
        table.add_column(column)
    # Cells hold user input: render them as plain text, never as markup.
    table.add_row(*(Text(str(value)) for value in row))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")
