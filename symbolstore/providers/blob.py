"""
Blob storage provider for serving files over HTTP.

This module provides the BlobStorageProvider class which answers
download requests with a redirect to the file's blob URL. Before
redirecting it can verify with a HEAD request that the blob exists,
so missing files produce a not-found result instead of a broken
redirect.
"""

import asyncio
import logging
import time
from urllib.parse import quote, urlsplit

import requests

from symbolstore.core.results import DownloadResult, NotFoundResult, RedirectResult
from symbolstore.exceptions import StorageError, StorageUnavailableError, ValidationError
from symbolstore.providers.base import StorageProvider

logger = logging.getLogger(__name__)


class BlobStorageProvider(StorageProvider):
    """
    Provider redirecting downloads to an HTTP blob container.

    Blob URLs are built as ``{base_url}/{folder_name}/{file_name}``. The
    redirect uses the scheme of the incoming request, so clients that
    came in over https are never sent to plain http.

    Examples
    --------
    >>> provider = BlobStorageProvider("https://blobs.example.org/gallery")
    >>> provider.get_blob_url("symbol-packages", "foo.1.0.0.snupkg")
    'https://blobs.example.org/gallery/symbol-packages/foo.1.0.0.snupkg'
    >>>
    >>> # Skip the existence check and always redirect
    >>> provider = BlobStorageProvider("https://blobs.example.org", check_exists=False)
    """

    SUPPORTED_SCHEMES = ["http", "https"]

    # Default settings
    DEFAULT_TIMEOUT = 30
    MAX_RETRIES = 3
    RETRY_BACKOFF_BASE = 2

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        check_exists: bool = True,
        timeout: int = DEFAULT_TIMEOUT,
    ):
        """
        Initialize blob storage provider.

        Parameters
        ----------
        base_url : str
            Absolute http(s) URL of the blob container
        session : requests.Session, optional
            HTTP session to use for existence checks.
        check_exists : bool, optional
            Verify the blob with a HEAD request before redirecting
            (default: True).
        timeout : int, optional
            Request timeout in seconds (default: 30)
        """
        parts = urlsplit(base_url)
        if parts.scheme not in self.SUPPORTED_SCHEMES or not parts.netloc:
            raise ValueError(
                f"Unsupported blob base URL: '{base_url}'. "
                f"Expected an absolute URL with scheme {self.SUPPORTED_SCHEMES}"
            )

        self._base_url = base_url.rstrip("/")
        self._session = session
        self._check_exists = check_exists
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        """Return the blob container URL."""
        return self._base_url

    @property
    def check_exists(self) -> bool:
        """Return whether blobs are verified before redirecting."""
        return self._check_exists

    @property
    def name(self) -> str:
        """Return provider name."""
        return "Blob storage"

    @property
    def location(self) -> str:
        """Return the blob container URL."""
        return self._base_url

    def get_blob_url(
        self,
        folder_name: str,
        file_name: str,
        request_url: str | None = None,
    ) -> str:
        """
        Build the URL of a blob.

        Parameters
        ----------
        folder_name : str
            Storage folder
        file_name : str
            File name inside the folder
        request_url : str, optional
            Incoming request URL; its http(s) scheme replaces the
            container's scheme.

        Returns
        -------
        str
            Absolute blob URL

        Raises
        ------
        ValidationError
            If folder or file name is empty
        """
        if not folder_name or not file_name:
            raise ValidationError("Storage folder name and file name must not be empty")

        url = f"{self._base_url}/{quote(folder_name)}/{quote(file_name)}"

        if request_url:
            scheme = urlsplit(request_url).scheme.lower()
            if scheme in self.SUPPORTED_SCHEMES:
                url = urlsplit(url)._replace(scheme=scheme).geturl()

        return url

    async def create_download_result(
        self,
        request_url: str,
        folder_name: str,
        file_name: str,
    ) -> DownloadResult:
        """
        Create a redirect to the blob, or a not-found result.

        Raises
        ------
        StorageError
            If the blob store denies access or answers with a client error
        StorageUnavailableError
            If the blob store cannot be reached after all retry attempts
        """
        url = self.get_blob_url(folder_name, file_name, request_url)

        if self._check_exists:
            status_code = await asyncio.to_thread(
                self._head_with_retry, url, folder_name, file_name
            )

            if status_code == 404:
                logger.info(f"Blob {folder_name}/{file_name} not found")
                return NotFoundResult(f"File {folder_name}/{file_name} not found")

            if status_code >= 400:
                raise StorageError(
                    f"Blob store refused {folder_name}/{file_name} "
                    f"with status {status_code}",
                    folder_name=folder_name,
                    file_name=file_name,
                    status_code=status_code,
                )

        logger.debug(f"Redirecting {request_url} to {url}")
        return RedirectResult(url)

    def _head_with_retry(self, url: str, folder_name: str, file_name: str) -> int:
        """
        Issue a HEAD request, retrying connection errors and 5xx answers.

        Returns
        -------
        int
            HTTP status code of the final answer (below 500)

        Raises
        ------
        StorageUnavailableError
            If the request fails after all retries
        """
        last_error = None
        last_status = None

        for attempt in range(1, self.MAX_RETRIES + 1):
            try:
                logger.debug(f"Checking {url} (attempt {attempt}/{self.MAX_RETRIES})")

                response = self._make_request(url)
                if response.status_code < 500:
                    return response.status_code

                last_status = response.status_code
                raise requests.HTTPError(
                    f"{response.status_code} Server Error for url: {url}",
                    response=response,
                )

            except requests.RequestException as e:
                last_error = e
                logger.warning(
                    f"Existence check failed for {folder_name}/{file_name} "
                    f"(attempt {attempt}): {e}"
                )

                if attempt < self.MAX_RETRIES:
                    wait_time = self.RETRY_BACKOFF_BASE**attempt
                    logger.debug(f"Retrying in {wait_time} seconds...")
                    time.sleep(wait_time)

        raise StorageUnavailableError(
            f"Blob store unavailable for {folder_name}/{file_name} after "
            f"{self.MAX_RETRIES} attempts: {last_error}",
            folder_name=folder_name,
            file_name=file_name,
            status_code=last_status,
        )

    def _make_request(self, url: str) -> requests.Response:
        """Make HTTP HEAD request."""
        session = self._session or requests.Session()
        return session.head(url, timeout=self._timeout, allow_redirects=True)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"BlobStorageProvider(base_url='{self._base_url}', "
            f"check_exists={self._check_exists})"
        )
