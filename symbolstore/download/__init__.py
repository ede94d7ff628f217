"""
Download module for symbolstore.

This module contains classes for producing symbol package downloads:
- SymbolPackageFileService: names symbol package files and delegates to storage
- DownloadResult and subclasses: responses produced by storage providers
"""

from symbolstore.core.results import (
    DownloadResult,
    FileResult,
    NotFoundResult,
    RedirectResult,
)
from symbolstore.download.symbol_file_service import SymbolPackageFileService

__all__ = [
    "SymbolPackageFileService",
    "DownloadResult",
    "FileResult",
    "NotFoundResult",
    "RedirectResult",
]
