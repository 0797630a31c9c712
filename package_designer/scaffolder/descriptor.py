"""Package descriptor model.

A ``PackageDescriptor`` holds everything known about the package being
generated during one ``make-package`` invocation.  It is never persisted.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from package_designer.utils import studly_case

PACKAGE_NAME_PATTERN = r"^[a-z0-9-]+/[a-z0-9-]+$"

_PACKAGE_NAME_RE = re.compile(PACKAGE_NAME_PATTERN)


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* has the ``vendor/package`` form."""
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def default_namespace(vendor: str, package: str) -> str:
    """Return ``Vendor\\Package`` in StudlyCase for the given segments.

    Examples::

        default_namespace("acme", "billing") -> "Acme\\Billing"
        default_namespace("my-org", "cool-thing") -> "MyOrg\\CoolThing"
    """
    return studly_case(vendor) + "\\" + studly_case(package)


class PackageDescriptor(BaseModel):
    """Metadata of the package to generate."""

    name: str = Field(..., pattern=PACKAGE_NAME_PATTERN, description="vendor/package")
    description: str = Field(default="")
    author_name: str = Field(default="")
    author_email: str = Field(default="")
    namespace: str = Field(default="", description="PHP namespace, defaults to Vendor\\Package")
    path: Optional[Path] = Field(
        default=None,
        description="Package directory, set once it has been created",
    )

    def model_post_init(self, __context: object) -> None:
        if not self.namespace:
            self.namespace = default_namespace(self.vendor, self.package)

    @property
    def vendor(self) -> str:
        return self.name.split("/", 1)[0]

    @property
    def package(self) -> str:
        return self.name.split("/", 1)[1]

    @property
    def provider_class(self) -> str:
        """Fully-qualified class of the package's service provider."""
        return f"{self.namespace}\\Providers\\AppServiceProvider"

    def summary_row(self) -> list[str]:
        """Values shown in the confirmation table."""
        return [
            self.name,
            self.description,
            self.author_name,
            self.author_email,
            self.namespace,
        ]
