"""
Download results produced by storage providers.

A result describes the HTTP response a web layer should send for a
download request: a redirect to the blob, a streamed local file, or a
not-found answer.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar


@dataclass(frozen=True)
class DownloadResult:
    """
    Base class for download results.

    Attributes
    ----------
    status_code : int
        HTTP status code the result maps to
    """

    status_code: ClassVar[int] = 200

    @property
    def found(self) -> bool:
        """Return True if the result serves the requested file."""
        return self.status_code < 400


@dataclass(frozen=True)
class RedirectResult(DownloadResult):
    """Redirect the client to the blob URL."""

    url: str

    status_code: ClassVar[int] = 302


@dataclass(frozen=True)
class FileResult(DownloadResult):
    """
    Stream a local file to the client.

    Attributes
    ----------
    path : Path
        Location of the file on disk
    content_type : str
        Content type sent with the file
    download_name : str
        File name offered to the client
    """

    path: Path
    content_type: str
    download_name: str

    status_code: ClassVar[int] = 200


@dataclass(frozen=True)
class NotFoundResult(DownloadResult):
    """The requested file does not exist in storage."""

    message: str = "File not found"

    status_code: ClassVar[int] = 404
