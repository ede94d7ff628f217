"""
Providers module for symbolstore.

This module contains storage provider implementations that turn a
folder name and file name into a download result. Currently supported
providers:

- StorageProvider: Abstract base for all storage backends
- FileSystemStorageProvider: Serves files from a local directory
- BlobStorageProvider: Redirects to files in an HTTP blob container
"""

from symbolstore.providers.base import StorageProvider
from symbolstore.providers.blob import BlobStorageProvider
from symbolstore.providers.filesystem import FileSystemStorageProvider

__all__ = [
    "StorageProvider",
    "FileSystemStorageProvider",
    "BlobStorageProvider",
]
