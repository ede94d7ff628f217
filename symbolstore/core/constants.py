"""
Storage constants shared by naming and storage providers.
"""

# Rendered with (id, version, extension), then lower-cased
PACKAGE_FILE_SAVE_PATH_TEMPLATE = "{0}.{1}{2}"

NUGET_SYMBOL_PACKAGE_FILE_EXTENSION = ".snupkg"

PACKAGES_FOLDER_NAME = "packages"
SYMBOL_PACKAGES_FOLDER_NAME = "symbol-packages"

PACKAGE_CONTENT_TYPE = "binary/octet-stream"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Folders served with the package content type
PACKAGE_CONTENT_FOLDERS = (PACKAGES_FOLDER_NAME, SYMBOL_PACKAGES_FOLDER_NAME)


def get_content_type(folder_name: str) -> str:
    """Return the content type served for files in a storage folder."""
    if folder_name in PACKAGE_CONTENT_FOLDERS:
        return PACKAGE_CONTENT_TYPE
    return DEFAULT_CONTENT_TYPE
