"""Package designer -- scaffolds packages inside a Laravel monorepo."""

__version__ = "1.0.0"

from package_designer.config import Config
from package_designer.scaffolder import PackageDescriptor, PackageGenerator

__all__ = ["Config", "PackageDescriptor", "PackageGenerator", "__version__"]
