"""Package scaffolder -- generates a new package from the skeleton.

Quick usage::

    from package_designer.config import Config
    from package_designer.scaffolder import PackageGenerator, collect_descriptor

    descriptor = collect_descriptor("acme/billing")
    package_path = PackageGenerator(Config()).generate(descriptor)
"""

from package_designer.scaffolder.descriptor import PackageDescriptor, default_namespace
from package_designer.scaffolder.generator import PackageGenerator
from package_designer.scaffolder.prompts import collect_descriptor

__all__ = [
    "PackageDescriptor",
    "PackageGenerator",
    "collect_descriptor",
    "default_namespace",
]
