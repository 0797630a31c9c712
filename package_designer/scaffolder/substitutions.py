"""Placeholder substitution tables for the skeleton's template files.

Each template file is patched with an ordered list of ``(literal,
replacement)`` pairs.  Matching is exact and case-sensitive; no regular
expression syntax is interpreted in the literals.  All pairs of a table are
applied in one pass, so text inserted by one pair is never matched by
another.
"""

from __future__ import annotations

import re
from typing import Callable

from package_designer.config import SkeletonConfig
from package_designer.scaffolder.descriptor import PackageDescriptor
from package_designer.utils import json_escape

Replacement = tuple[str, str]

LARAVEL_PLACEHOLDER = '"laravel": {}'


def replace_literals(content: str, replacements: list[Replacement]) -> str:
    """Replace every occurrence of each literal in *content* in a single pass.

    Longer literals win over shorter ones starting at the same position, so
    ``uccello/package-skeleton`` is replaced as a whole rather than through
    its ``package-skeleton`` suffix.
    """
    table = {literal: replacement for literal, replacement in replacements if literal}
    if not table:
        return content

    pattern = re.compile(
        "|".join(re.escape(literal) for literal in sorted(table, key=len, reverse=True))
    )
    return pattern.sub(lambda match: table[match.group(0)], content)


# ---------------------------------------------------------------------------
# Per-file tables
# ---------------------------------------------------------------------------


def laravel_block(descriptor: PackageDescriptor) -> str:
    """Composer ``extra.laravel`` block registering the package provider."""
    provider = json_escape(descriptor.provider_class)
    return (
        '"laravel": {\n'
        '            "providers": [\n'
        f'                "{provider}"\n'
        "            ]\n"
        "        }"
    )


def composer_json_replacements(
    skeleton: SkeletonConfig, descriptor: PackageDescriptor
) -> list[Replacement]:
    # composer.json is JSON text: search and insert values in escaped form.
    return [
        (skeleton.name, descriptor.name),
        (json_escape(skeleton.namespace), json_escape(descriptor.namespace)),
        (json_escape(skeleton.description), json_escape(descriptor.description)),
        (json_escape(skeleton.author_name), json_escape(descriptor.author_name)),
        (json_escape(skeleton.author_email), json_escape(descriptor.author_email)),
        (LARAVEL_PLACEHOLDER, laravel_block(descriptor)),
    ]


def webpack_mix_replacements(
    skeleton: SkeletonConfig, descriptor: PackageDescriptor
) -> list[Replacement]:
    return [
        (skeleton.name, descriptor.name),
    ]


def service_provider_replacements(
    skeleton: SkeletonConfig, descriptor: PackageDescriptor
) -> list[Replacement]:
    return [
        (skeleton.name, descriptor.name),
        (skeleton.namespace, descriptor.namespace),
        (skeleton.slug, descriptor.package),
    ]


def routes_replacements(
    skeleton: SkeletonConfig, descriptor: PackageDescriptor
) -> list[Replacement]:
    return [
        (skeleton.namespace, descriptor.namespace),
        (skeleton.slug, descriptor.package),
    ]


TableBuilder = Callable[[SkeletonConfig, PackageDescriptor], list[Replacement]]

# Template files rewritten in every generated package, relative to its root.
TEMPLATE_FILES: dict[str, TableBuilder] = {
    "composer.json": composer_json_replacements,
    "webpack.mix.js": webpack_mix_replacements,
    "src/Providers/AppServiceProvider.php": service_provider_replacements,
    "src/Http/routes.php": routes_replacements,
}
