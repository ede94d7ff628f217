"""
File system storage provider.

This module provides the FileSystemStorageProvider class which serves
files from a local directory, one subdirectory per storage folder.
"""

import asyncio
import logging
from pathlib import Path

from symbolstore.core.constants import get_content_type
from symbolstore.core.results import DownloadResult, FileResult, NotFoundResult
from symbolstore.exceptions import ValidationError
from symbolstore.providers.base import StorageProvider

logger = logging.getLogger(__name__)


class FileSystemStorageProvider(StorageProvider):
    """
    Serves stored files from a local directory.

    Files are organized in one subdirectory per storage folder:

        data/symbol-packages/newtonsoft.json.12.0.3.snupkg
        data/packages/newtonsoft.json.12.0.3.nupkg

    Attributes
    ----------
    root_dir : Path
        Base directory holding the storage folders

    Examples
    --------
    >>> provider = FileSystemStorageProvider("./data")
    >>> provider.get_path("symbol-packages", "foo.1.0.0.snupkg")
    PosixPath('data/symbol-packages/foo.1.0.0.snupkg')
    """

    def __init__(self, root_dir: str | Path = "./data"):
        """
        Initialize file system storage.

        Parameters
        ----------
        root_dir : str or Path
            Base directory holding the storage folders. It is not created;
            a missing directory simply yields not-found results.
        """
        self._root_dir = Path(root_dir)

    @property
    def root_dir(self) -> Path:
        """Return the base storage directory."""
        return self._root_dir

    @property
    def name(self) -> str:
        """Return provider name."""
        return "File system"

    @property
    def location(self) -> str:
        """Return the storage directory as a string."""
        return str(self._root_dir)

    def get_path(self, folder_name: str, file_name: str) -> Path:
        """
        Return the on-disk path of a stored file.

        Parameters
        ----------
        folder_name : str
            Storage folder
        file_name : str
            File name inside the folder

        Returns
        -------
        Path
            Full path to the file

        Raises
        ------
        ValidationError
            If either name is empty or would leave the storage directory
        """
        for label, value in (("folder name", folder_name), ("file name", file_name)):
            if not value or not value.strip():
                raise ValidationError(f"Storage {label} must not be empty")
            if value in (".", "..") or "/" in value or "\\" in value:
                raise ValidationError(f"Invalid storage {label}: '{value}'")

        return self._root_dir / folder_name / file_name

    def exists(self, folder_name: str, file_name: str) -> bool:
        """Check if a stored file exists."""
        return self.get_path(folder_name, file_name).is_file()

    async def create_download_result(
        self,
        request_url: str,
        folder_name: str,
        file_name: str,
    ) -> DownloadResult:
        """
        Create a file result for a stored file.

        The request URL is not needed to serve local files.

        Returns
        -------
        DownloadResult
            FileResult if the file exists, NotFoundResult otherwise
        """
        path = self.get_path(folder_name, file_name)

        if not await asyncio.to_thread(path.is_file):
            logger.info(f"File {folder_name}/{file_name} not found in {self._root_dir}")
            return NotFoundResult(f"File {folder_name}/{file_name} not found")

        logger.debug(f"Serving {path} for {request_url}")
        return FileResult(
            path=path,
            content_type=get_content_type(folder_name),
            download_name=file_name,
        )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"FileSystemStorageProvider(root_dir='{self._root_dir}')"
