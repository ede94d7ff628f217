"""
Storage file naming for packages and symbol packages.

This module provides the FileNamingPolicy class that maps a package
identity to the canonical file name used as a storage key, and the
version normalization it relies on.
"""

import re
from typing import Optional

from symbolstore.core.models import Package
from symbolstore.exceptions import ValidationError

# major[.minor[.patch[.revision]]][-prerelease][+metadata]
VERSION_PATTERN = re.compile(
    r"^(?P<release>\d+(?:\.\d+){0,3})"
    r"(?P<prerelease>-[0-9A-Za-z][0-9A-Za-z.-]*)?"
    r"(?:\+[0-9A-Za-z][0-9A-Za-z.-]*)?$"
)


def normalize_version(version: str) -> str:
    """
    Normalize a package version string.

    Numeric parts lose their leading zeros, the release is padded to
    three parts, a zero fourth part is dropped and build metadata is
    removed. Strings that are not valid versions are returned unchanged.

    Parameters
    ----------
    version : str
        Version string as uploaded

    Returns
    -------
    str
        Normalized version

    Examples
    --------
    >>> normalize_version("1.01")
    '1.1.0'
    >>> normalize_version("2.0.0.0-beta+sha.1")
    '2.0.0-beta'
    """
    match = VERSION_PATTERN.match(version.strip())
    if not match:
        return version

    parts = [int(part) for part in match.group("release").split(".")]
    while len(parts) < 3:
        parts.append(0)
    if len(parts) == 4 and parts[3] == 0:
        parts = parts[:3]

    normalized = ".".join(str(part) for part in parts)
    prerelease = match.group("prerelease")
    if prerelease:
        normalized += prerelease
    return normalized


class FileNamingPolicy:
    """
    Maps package identities to storage file names.

    Names are rendered from a path template with ``(id, version, extension)``
    placeholders and lower-cased, because package ids changed case over
    time and blob storage is case-sensitive.

    Examples
    --------
    >>> policy = FileNamingPolicy()
    >>> policy.build_file_name("Newtonsoft.Json", "12.0.3", "{0}.{1}{2}", ".snupkg")
    'newtonsoft.json.12.0.3.snupkg'
    """

    def build_file_name(
        self,
        id: Optional[str],
        version: Optional[str],
        path_template: str,
        extension: str,
    ) -> str:
        """
        Render the storage file name for an id and version.

        Parameters
        ----------
        id : str
            Package id
        version : str
            Package version, used as given
        path_template : str
            Template with ``{0}`` (id), ``{1}`` (version), ``{2}`` (extension)
        extension : str
            File extension including dot (e.g., ".snupkg")

        Returns
        -------
        str
            Lower-cased file name

        Raises
        ------
        ValidationError
            If id or version is missing or blank, or the template is malformed
        """
        if id is None or not id.strip():
            raise ValidationError("Package id must not be empty")
        if version is None or not version.strip():
            raise ValidationError("Package version must not be empty")

        try:
            file_name = path_template.format(id, version, extension)
        except (IndexError, KeyError, ValueError) as e:
            raise ValidationError(
                f"Invalid path template '{path_template}': {e}"
            ) from e

        return file_name.lower()

    def build_package_file_name(
        self,
        package: Optional[Package],
        path_template: str,
        extension: str,
    ) -> str:
        """
        Render the storage file name for a package entity.

        The normalized version is preferred; when the package does not carry
        one, its version is normalized first.

        Raises
        ------
        ValidationError
            If the package has no registration id or no version
        """
        if package is None:
            raise ValidationError("Package must not be None")

        if (
            package.registration is None
            or not (package.id or "").strip()
            or (
                not (package.normalized_version or "").strip()
                and not (package.version or "").strip()
            )
        ):
            raise ValidationError(
                "The package is missing required data: "
                "a registration id and a version are needed to build a file name"
            )

        if (package.normalized_version or "").strip():
            version = package.normalized_version
        else:
            version = normalize_version(package.version)
        return self.build_file_name(package.id, version, path_template, extension)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__}()"
