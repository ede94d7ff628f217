"""
Package entities consumed by the symbol package file service.

These are plain value objects supplied by the caller per request. The file
service only reads identity information from them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


class PackageIdentity(NamedTuple):
    """Package id and version pair."""

    id: str
    version: str


class PackageStatus(Enum):
    """Availability status of a symbol package."""

    AVAILABLE = "available"
    DELETED = "deleted"
    VALIDATING = "validating"
    FAILED_VALIDATION = "failed_validation"


@dataclass(frozen=True)
class PackageRegistration:
    """
    Registration owning all versions of a package id.

    Attributes
    ----------
    id : str
        Package id as registered (original casing preserved)
    """

    id: str


@dataclass(frozen=True)
class Package:
    """
    A single published package version.

    Attributes
    ----------
    registration : PackageRegistration
        Owning registration (provides the package id)
    version : str
        Version string as uploaded
    normalized_version : str, optional
        Normalized form of the version, when already known

    Examples
    --------
    >>> package = Package(PackageRegistration("Newtonsoft.Json"), "12.0.3")
    >>> package.identity
    PackageIdentity(id='Newtonsoft.Json', version='12.0.3')
    """

    registration: Optional[PackageRegistration]
    version: Optional[str]
    normalized_version: Optional[str] = None

    @property
    def id(self) -> Optional[str]:
        """Return the package id from the owning registration."""
        if self.registration is None:
            return None
        return self.registration.id

    @property
    def identity(self) -> PackageIdentity:
        """Return the (id, version) pair, preferring the normalized version."""
        return PackageIdentity(self.id, self.normalized_version or self.version)


@dataclass(frozen=True)
class SymbolPackage:
    """
    Symbol archive published alongside a package.

    Only ``package`` is used for naming; the remaining fields describe the
    uploaded archive.

    Attributes
    ----------
    package : Package
        Owning package
    key : int, optional
        Database key of the symbol package
    status : PackageStatus
        Availability status
    file_size : int, optional
        Archive size in bytes
    hash : str, optional
        Archive hash (base64)
    """

    package: Package
    key: Optional[int] = None
    status: PackageStatus = PackageStatus.AVAILABLE
    file_size: Optional[int] = None
    hash: Optional[str] = None

    @property
    def id(self) -> Optional[str]:
        """Return the owning package id."""
        return self.package.id

    @property
    def version(self) -> Optional[str]:
        """Return the owning package version."""
        return self.package.version
