"""
symbolstore - Download results for NuGet symbol packages.

This package names symbol package (.snupkg) files in storage and asks a
pluggable storage provider to produce the download result for them.

Example usage::

    import asyncio

    from symbolstore import FileSystemStorageProvider, SymbolPackageFileService

    service = SymbolPackageFileService(FileSystemStorageProvider("./data"))
    result = asyncio.run(
        service.create_download_symbol_package_result_for(
            "https://www.example.org/api/v2/symbolpackage/Foo/1.0.0",
            "Foo",
            "1.0.0",
        )
    )
"""

from symbolstore.core.models import (
    Package,
    PackageIdentity,
    PackageRegistration,
    PackageStatus,
    SymbolPackage,
)
from symbolstore.core.naming import FileNamingPolicy
from symbolstore.core.results import (
    DownloadResult,
    FileResult,
    NotFoundResult,
    RedirectResult,
)
from symbolstore.download.symbol_file_service import (
    SymbolPackageFileService,
)
from symbolstore.exceptions import (
    StorageError,
    StorageUnavailableError,
    SymbolStoreError,
    ValidationError,
)
from symbolstore.providers.base import StorageProvider
from symbolstore.providers.blob import BlobStorageProvider
from symbolstore.providers.filesystem import FileSystemStorageProvider

__version__ = "0.1.0"

__all__ = [
    # Core
    "FileNamingPolicy",
    "Package",
    "PackageIdentity",
    "PackageRegistration",
    "PackageStatus",
    "SymbolPackage",
    # Download
    "SymbolPackageFileService",
    "DownloadResult",
    "FileResult",
    "NotFoundResult",
    "RedirectResult",
    # Providers
    "StorageProvider",
    "FileSystemStorageProvider",
    "BlobStorageProvider",
    # Exceptions
    "SymbolStoreError",
    "ValidationError",
    "StorageError",
    "StorageUnavailableError",
    # Version
    "__version__",
]
