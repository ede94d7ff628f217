"""
Command-line interface for symbolstore.

This module provides CLI commands for computing symbol package storage
names and resolving symbol package downloads against a storage backend.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from symbolstore import __version__
from symbolstore.core.constants import SYMBOL_PACKAGES_FOLDER_NAME
from symbolstore.core.results import (
    DownloadResult,
    FileResult,
    NotFoundResult,
    RedirectResult,
)
from symbolstore.download.symbol_file_service import SymbolPackageFileService
from symbolstore.exceptions import StorageError, ValidationError
from symbolstore.providers.base import StorageProvider
from symbolstore.providers.blob import BlobStorageProvider
from symbolstore.providers.filesystem import FileSystemStorageProvider

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_URL = "https://localhost/api/v2/symbolpackage"


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="symbolstore",
        description="Resolve symbol package (.snupkg) downloads from storage",
        epilog="Example: symbolstore name Newtonsoft.Json 12.0.3",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Name command
    name_parser = subparsers.add_parser(
        "name",
        help="Print the storage file name of a symbol package",
        description="Compute the storage folder and file name of a symbol package",
    )
    name_parser.add_argument("id", help="Package id (e.g., Newtonsoft.Json)")
    name_parser.add_argument("version", help="Normalized package version (e.g., 12.0.3)")

    # Download command
    download_parser = subparsers.add_parser(
        "download",
        help="Resolve the download of a symbol package",
        description="Ask a storage backend for the download result of a symbol package",
    )
    download_parser.add_argument("id", help="Package id (e.g., Newtonsoft.Json)")
    download_parser.add_argument("version", help="Normalized package version")

    storage_group = download_parser.add_mutually_exclusive_group(required=True)
    storage_group.add_argument(
        "--storage-dir",
        metavar="DIR",
        help="Serve from a local storage directory",
    )
    storage_group.add_argument(
        "--blob-url",
        metavar="URL",
        help="Redirect to a blob container URL",
    )

    download_parser.add_argument(
        "--request-url",
        metavar="URL",
        help=f"URL of the incoming request (default: {DEFAULT_REQUEST_URL}/ID/VERSION)",
    )
    download_parser.add_argument(
        "--no-check",
        action="store_true",
        help="Do not verify that the blob exists before redirecting",
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_storage(args: argparse.Namespace) -> StorageProvider:
    """
    Create the storage provider selected on the command line.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed download command arguments

    Returns
    -------
    StorageProvider
        File system or blob storage provider
    """
    if args.blob_url:
        return BlobStorageProvider(args.blob_url, check_exists=not args.no_check)
    return FileSystemStorageProvider(args.storage_dir)


def format_result(result: DownloadResult) -> str:
    """
    Format a download result for display.

    Parameters
    ----------
    result : DownloadResult
        Result returned by the storage provider

    Returns
    -------
    str
        One-line description of the result
    """
    if isinstance(result, RedirectResult):
        return f"{result.status_code} -> {result.url}"
    if isinstance(result, FileResult):
        return f"{result.status_code} {result.path} ({result.content_type})"
    if isinstance(result, NotFoundResult):
        return f"{result.status_code} {result.message}"
    return f"{result.status_code} {result!r}"


def cmd_name(args: argparse.Namespace) -> int:
    """
    Execute the name command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    int
        Exit code (0 for success, 1 for error)
    """
    service = SymbolPackageFileService(FileSystemStorageProvider())

    try:
        file_name = service.get_file_name(id=args.id, version=args.version)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Folder:    {SYMBOL_PACKAGES_FOLDER_NAME}")
    print(f"File name: {file_name}")
    return 0


def cmd_download(args: argparse.Namespace) -> int:
    """
    Execute the download command.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments

    Returns
    -------
    int
        Exit code (0 if the file was found, 1 otherwise)
    """
    request_url = args.request_url or f"{DEFAULT_REQUEST_URL}/{args.id}/{args.version}"

    try:
        storage = create_storage(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    service = SymbolPackageFileService(storage)
    logger.debug(f"Resolving {args.id} {args.version} using {storage}")

    try:
        result = asyncio.run(
            service.create_download_symbol_package_result_for(
                request_url, args.id, args.version
            )
        )
    except (StorageError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_result(result))
    return 0 if result.found else 1


def main(args: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Parameters
    ----------
    args : list[str], optional
        Command-line arguments (defaults to sys.argv[1:])

    Returns
    -------
    int
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.verbose)

    if parsed_args.command is None:
        parser.print_help()
        return 0

    if parsed_args.command == "name":
        return cmd_name(parsed_args)

    if parsed_args.command == "download":
        return cmd_download(parsed_args)

    # Unknown command (shouldn't happen with argparse)
    print(f"Unknown command: {parsed_args.command}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
