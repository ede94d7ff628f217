"""
Core module for symbolstore.

This module contains package entities, storage constants, download
results and the file naming policy.
"""

from symbolstore.core.models import (
    Package,
    PackageIdentity,
    PackageRegistration,
    PackageStatus,
    SymbolPackage,
)
from symbolstore.core.naming import FileNamingPolicy, normalize_version
from symbolstore.core.results import (
    DownloadResult,
    FileResult,
    NotFoundResult,
    RedirectResult,
)

__all__ = [
    "FileNamingPolicy",
    "normalize_version",
    "Package",
    "PackageIdentity",
    "PackageRegistration",
    "PackageStatus",
    "SymbolPackage",
    "DownloadResult",
    "FileResult",
    "NotFoundResult",
    "RedirectResult",
]
