"""
Custom exceptions for symbolstore.

This module defines all custom exceptions used throughout the symbolstore package.
All exceptions inherit from SymbolStoreError for easy catching of package-specific
errors.
"""


class SymbolStoreError(Exception):
    """
    Base exception for all symbolstore errors.

    All custom exceptions in this package inherit from this class,
    allowing users to catch all symbolstore-specific errors with a single
    except clause.

    Examples
    --------
    >>> try:
    ...     # some symbolstore operation
    ...     pass
    ... except SymbolStoreError as e:
    ...     print(f"symbolstore error: {e}")
    """

    pass


class ValidationError(SymbolStoreError):
    """
    Error validating input data.

    Raised when a package identity, path template or storage path fails
    validation checks, such as a missing id or a file name escaping the
    storage root.

    Examples
    --------
    >>> raise ValidationError("Package id must not be empty")
    """

    pass


class StorageError(SymbolStoreError):
    """
    Error reported by a storage provider.

    Attributes
    ----------
    folder_name : str, optional
        Storage folder that was being accessed when the error occurred.
    file_name : str, optional
        File name that was being accessed.
    status_code : int, optional
        HTTP status code if applicable.

    Examples
    --------
    >>> raise StorageError("Access denied", file_name="foo.1.0.0.snupkg")
    """

    def __init__(
        self,
        message: str,
        folder_name: str | None = None,
        file_name: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.folder_name = folder_name
        self.file_name = file_name
        self.status_code = status_code


class StorageUnavailableError(StorageError):
    """
    Storage backend could not be reached.

    Raised when a provider gives up after exhausting its retries on
    connection errors or server-side failures.
    """

    pass
