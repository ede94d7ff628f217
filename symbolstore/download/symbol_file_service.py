"""
Download service for symbol packages.

This module provides the SymbolPackageFileService class which names
symbol package files and asks a storage provider for their download
result.
"""

from typing import Optional

from symbolstore.core.constants import (
    NUGET_SYMBOL_PACKAGE_FILE_EXTENSION,
    PACKAGE_FILE_SAVE_PATH_TEMPLATE,
    SYMBOL_PACKAGES_FOLDER_NAME,
)
from symbolstore.core.models import SymbolPackage
from symbolstore.core.naming import FileNamingPolicy
from symbolstore.core.results import DownloadResult
from symbolstore.providers.base import StorageProvider


class SymbolPackageFileService:
    """
    Builds download results for symbol packages.

    Symbol packages are stored in the ``symbol-packages`` folder under
    their lower-cased ``{id}.{version}.snupkg`` name. The storage result
    is returned as-is and provider errors propagate unchanged.

    Examples
    --------
    >>> service = SymbolPackageFileService(FileSystemStorageProvider("./data"))
    >>> result = await service.create_download_symbol_package_result_for(
    ...     "https://www.example.org/api/v2/symbolpackage/Foo/1.0.0", "Foo", "1.0.0"
    ... )
    """

    def __init__(
        self,
        storage: StorageProvider,
        naming: Optional[FileNamingPolicy] = None,
    ):
        """
        Initialize symbol package file service.

        Parameters
        ----------
        storage : StorageProvider
            Storage backend producing download results (shared, not owned)
        naming : FileNamingPolicy, optional
            File naming policy (default: FileNamingPolicy())
        """
        self._storage = storage
        self._naming = naming or FileNamingPolicy()

    @property
    def storage(self) -> StorageProvider:
        """Return the storage provider."""
        return self._storage

    @property
    def naming(self) -> FileNamingPolicy:
        """Return the file naming policy."""
        return self._naming

    def get_file_name(
        self,
        symbol_package: Optional[SymbolPackage] = None,
        id: Optional[str] = None,
        version: Optional[str] = None,
    ) -> str:
        """
        Return the storage file name for a symbol package.

        Pass either ``symbol_package`` or ``id`` and ``version``.

        Raises
        ------
        ValidationError
            If the identity is incomplete
        """
        if symbol_package is not None:
            return self._naming.build_package_file_name(
                symbol_package.package,
                PACKAGE_FILE_SAVE_PATH_TEMPLATE,
                NUGET_SYMBOL_PACKAGE_FILE_EXTENSION,
            )
        return self._naming.build_file_name(
            id,
            version,
            PACKAGE_FILE_SAVE_PATH_TEMPLATE,
            NUGET_SYMBOL_PACKAGE_FILE_EXTENSION,
        )

    async def create_download_symbol_package_result(
        self,
        request_url: str,
        symbol_package: SymbolPackage,
    ) -> DownloadResult:
        """
        Create the download result for a symbol package entity.

        Parameters
        ----------
        request_url : str
            Absolute URL of the incoming download request
        symbol_package : SymbolPackage
            Symbol package whose owning package supplies id and version

        Returns
        -------
        DownloadResult
            Whatever the storage provider returns

        Raises
        ------
        ValidationError
            If the owning package has no id or version
        StorageError
            Propagated from the storage provider
        """
        file_name = self.get_file_name(symbol_package=symbol_package)
        return await self._storage.create_download_result(
            request_url, SYMBOL_PACKAGES_FOLDER_NAME, file_name
        )

    async def create_download_symbol_package_result_for(
        self,
        request_url: str,
        id: str,
        version: str,
    ) -> DownloadResult:
        """
        Create the download result for a symbol package id and version.

        The version is used as given, so callers pass the normalized
        version. Same contract as create_download_symbol_package_result().
        """
        file_name = self.get_file_name(id=id, version=version)
        return await self._storage.create_download_result(
            request_url, SYMBOL_PACKAGES_FOLDER_NAME, file_name
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"SymbolPackageFileService(storage={self._storage!r})"
