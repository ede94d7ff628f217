"""
Base provider class for storage backends.

This module defines the abstract base class for all storage providers
in symbolstore. Providers are responsible for turning a folder name and
file name into a download result for a given request URL.
"""

from abc import ABC, abstractmethod

from symbolstore.core.results import DownloadResult


class StorageProvider(ABC):
    """
    Abstract base class for storage providers.

    All storage providers must inherit from this class and implement
    the required abstract methods. Implementations must be safe to call
    concurrently; retry and error semantics are defined by each provider.

    Attributes
    ----------
    name : str
        Human-readable name of the provider
    location : str
        Root location (directory or base URL) of the storage

    Examples
    --------
    >>> class MyProvider(StorageProvider):
    ...     @property
    ...     def name(self) -> str:
    ...         return "My Storage"
    ...
    ...     @property
    ...     def location(self) -> str:
    ...         return "memory://"
    ...
    ...     async def create_download_result(self, request_url, folder_name, file_name):
    ...         return NotFoundResult()
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return human-readable name of the provider.

        Returns
        -------
        str
            Provider name (e.g., "File system", "Blob storage")
        """
        pass

    @property
    @abstractmethod
    def location(self) -> str:
        """
        Return root location of the storage.

        Returns
        -------
        str
            Directory path or base URL
        """
        pass

    @abstractmethod
    async def create_download_result(
        self,
        request_url: str,
        folder_name: str,
        file_name: str,
    ) -> DownloadResult:
        """
        Create a download result for a stored file.

        Parameters
        ----------
        request_url : str
            Absolute URL of the incoming download request
        folder_name : str
            Storage folder (e.g., "symbol-packages")
        file_name : str
            File name inside the folder

        Returns
        -------
        DownloadResult
            Redirect, file or not-found result

        Raises
        ------
        StorageError
            If the storage backend fails
        """
        pass

    def __repr__(self) -> str:
        """Return string representation of the provider."""
        return f"{self.__class__.__name__}(location='{self.location}')"

    def __str__(self) -> str:
        """Return human-readable string representation."""
        return f"{self.name} ({self.location})"
