"""Shared pytest fixtures for the package designer test suite.

Provides reusable fixtures for:
- A temporary monorepo root with a package skeleton and a root manifest
- A ``Config`` pointing at that root
- A sample ``PackageDescriptor``
"""

from __future__ import annotations

import json
import textwrap
from pathlib import Path
from typing import Any

import pytest

from package_designer.config import Config
from package_designer.scaffolder.descriptor import PackageDescriptor
from package_designer.utils import console


# ---------------------------------------------------------------------------
# Skeleton contents
# ---------------------------------------------------------------------------

SKELETON_COMPOSER_JSON = textwrap.dedent(r"""
    {
        "name": "uccello/package-skeleton",
        "description": "Package skeleton for Uccello",
        "type": "library",
        "license": "MIT",
        "authors": [
            {
                "name": "Jonathan SARDO",
                "email": "jonathan@uccellolabs.com"
            }
        ],
        "autoload": {
            "psr-4": {
                "Uccello\\PackageSkeleton\\": "src/"
            }
        },
        "extra": {
            "laravel": {}
        }
    }
""").lstrip()

SKELETON_WEBPACK_MIX = textwrap.dedent("""
    const mix = require('laravel-mix')

    mix.setPublicPath('public')
      .js('resources/assets/js/app.js', 'public/js')
      .version()
      .copy('public', '../../../public/vendor/uccello/package-skeleton')
""").lstrip()

SKELETON_SERVICE_PROVIDER = textwrap.dedent("""
    <?php

    namespace Uccello\\PackageSkeleton\\Providers;

    use Illuminate\\Support\\ServiceProvider;

    class AppServiceProvider extends ServiceProvider
    {
      public function boot()
      {
        $this->loadViewsFrom(__DIR__ . '/../../resources/views', 'package-skeleton');

        $this->publishes([
          __DIR__ . '/../../public' => public_path('vendor/uccello/package-skeleton'),
        ], 'package-skeleton-assets');
      }
    }
""").lstrip()

SKELETON_ROUTES = textwrap.dedent("""
    <?php

    Route::middleware('web', 'auth')
    ->namespace('Uccello\\PackageSkeleton\\Http\\Controllers')
    ->name('package-skeleton.')
    ->group(function () {
        Route::get('/', 'DefaultController@index')->name('index');
    });
""").lstrip()

SKELETON_VIEW = "<div>{{ trans('package-skeleton::default.title') }}</div>\n"

ROOT_MANIFEST: dict[str, Any] = {
    "name": "acme/monorepo",
    "type": "project",
    "require": {
        "php": "^7.1.3",
        "laravel/framework": "5.7.*",
    },
    "repositories": [
        {"type": "vcs", "url": "https://github.com/acme/forms"},
        {"type": "path", "url": "./packages/acme/crm"},
    ],
}


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def write_skeleton(skeleton_dir: Path) -> Path:
    """Write a package skeleton tree (including ``README.md`` and ``.git``)."""
    files = {
        "composer.json": SKELETON_COMPOSER_JSON,
        "webpack.mix.js": SKELETON_WEBPACK_MIX,
        "src/Providers/AppServiceProvider.php": SKELETON_SERVICE_PROVIDER,
        "src/Http/routes.php": SKELETON_ROUTES,
        "resources/views/index.blade.php": SKELETON_VIEW,
        "README.md": "# Package skeleton\n",
        ".git/HEAD": "ref: refs/heads/master\n",
        ".git/objects/ab/cdef0123": "blob",
        ".git/refs/heads/master": "0123456789abcdef\n",
    }
    for relative, content in files.items():
        path = skeleton_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return skeleton_dir


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def monorepo(tmp_path: Path) -> Path:
    """Temporary monorepo root with a skeleton and a root ``composer.json``."""
    root = tmp_path / "monorepo"
    write_skeleton(root / "vendor" / "uccello" / "package-skeleton")
    (root / "composer.json").write_text(json.dumps(ROOT_MANIFEST, indent=4) + "\n", encoding="utf-8")
    yield root


@pytest.fixture
def config(monorepo: Path) -> Config:
    """``Config`` rooted at the temporary monorepo."""
    return Config(root_dir=monorepo)


@pytest.fixture
def descriptor() -> PackageDescriptor:
    """Descriptor for ``acme/billing``."""
    return PackageDescriptor(
        name="acme/billing",
        description="Billing tools",
        author_name="Jane Doe",
        author_email="jane@acme.test",
    )


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop Rich from wrapping long temporary paths in captured output."""
    monkeypatch.setattr(console, "width", 1000)
