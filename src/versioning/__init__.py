"""Package filename parsing and version ordering."""

from .models import IgnoredFile, Package, VersionComponents, VersionOrder
from .parser import is_signature_path, parse_package_path, signature_base
from .compare import compare_packages, compare_versions

__all__ = [
    "IgnoredFile",
    "Package",
    "VersionComponents",
    "VersionOrder",
    "is_signature_path",
    "parse_package_path",
    "signature_base",
    "compare_packages",
    "compare_versions",
]
