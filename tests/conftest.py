"""
Pytest configuration and shared fixtures.

This module contains pytest fixtures and configuration that are shared
across all test modules.
"""

import pytest

from symbolstore.core.models import Package, PackageRegistration, SymbolPackage
from symbolstore.core.results import DownloadResult, NotFoundResult
from symbolstore.providers.base import StorageProvider

REQUEST_URL = "https://www.example.org/api/v2/symbolpackage/Foo/1.0.0"


class RecordingStorageProvider(StorageProvider):
    """Storage provider returning a fixed result and recording every call."""

    def __init__(self, result: DownloadResult | None = None, error: Exception | None = None):
        self.result = result or NotFoundResult()
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "Recording"

    @property
    def location(self) -> str:
        return "memory://"

    async def create_download_result(self, request_url, folder_name, file_name):
        self.calls.append((request_url, folder_name, file_name))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def request_url() -> str:
    """
    Provide an absolute download request URL.

    Returns
    -------
    str
        Request URL
    """
    return REQUEST_URL


@pytest.fixture
def recording_storage() -> RecordingStorageProvider:
    """Provide a storage provider that records its calls."""
    return RecordingStorageProvider()


@pytest.fixture
def sample_symbol_package() -> SymbolPackage:
    """
    Provide a symbol package for Newtonsoft.Json 12.0.3.

    Returns
    -------
    SymbolPackage
        Symbol package with an owning package and registration
    """
    package = Package(PackageRegistration("Newtonsoft.Json"), "12.0.3")
    return SymbolPackage(package, key=1, file_size=1024)


@pytest.fixture
def storage_dir(tmp_path):
    """
    Create a storage directory with one stored symbol package.

    Returns
    -------
    Path
        Path to the storage root
    """
    root = tmp_path / "storage"
    folder = root / "symbol-packages"
    folder.mkdir(parents=True)
    (folder / "newtonsoft.json.12.0.3.snupkg").write_bytes(b"PK\x03\x04" + b"\x00" * 26)
    return root
