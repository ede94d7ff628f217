"""
Unit tests for CLI module.

This module contains tests for command-line interface commands,
verifying correct parsing and output formatting.
"""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests

from symbolstore.cli.commands import (
    create_parser,
    create_storage,
    format_result,
    main,
)
from symbolstore.core.results import FileResult, NotFoundResult, RedirectResult
from symbolstore.providers.blob import BlobStorageProvider
from symbolstore.providers.filesystem import FileSystemStorageProvider


class TestCreateParser:
    """Tests for create_parser()."""

    def test_creates_parser(self):
        """Test that parser is created."""
        parser = create_parser()
        assert parser.prog == "symbolstore"

    def test_has_version_argument(self):
        """Test that --version is available."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_name_subcommand(self):
        """Test that name subcommand exists."""
        args = create_parser().parse_args(["name", "Foo", "1.0.0"])
        assert args.command == "name"
        assert args.id == "Foo"
        assert args.version == "1.0.0"

    def test_download_requires_storage(self):
        """Test that download needs --storage-dir or --blob-url."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["download", "Foo", "1.0.0"])

    def test_download_storage_options_exclusive(self):
        """Test that only one storage option is accepted."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(
                ["download", "Foo", "1.0.0", "--storage-dir", "d", "--blob-url", "https://x"]
            )

    def test_download_options(self):
        """Test download options."""
        args = create_parser().parse_args(
            ["download", "Foo", "1.0.0", "--blob-url", "https://x", "--no-check"]
        )
        assert args.blob_url == "https://x"
        assert args.no_check is True
        assert args.request_url is None


class TestCreateStorage:
    """Tests for create_storage()."""

    def test_file_system_storage(self, tmp_path):
        """Test file system provider selection."""
        args = create_parser().parse_args(
            ["download", "Foo", "1.0.0", "--storage-dir", str(tmp_path)]
        )
        storage = create_storage(args)

        assert isinstance(storage, FileSystemStorageProvider)
        assert storage.root_dir == tmp_path

    def test_blob_storage(self):
        """Test blob provider selection."""
        args = create_parser().parse_args(
            ["download", "Foo", "1.0.0", "--blob-url", "https://blobs.example.org", "--no-check"]
        )
        storage = create_storage(args)

        assert isinstance(storage, BlobStorageProvider)
        assert storage.check_exists is False


class TestFormatResult:
    """Tests for format_result()."""

    def test_format_redirect(self):
        """Test formatting a redirect."""
        assert format_result(RedirectResult("https://x/y")) == "302 -> https://x/y"

    def test_format_file(self):
        """Test formatting a file result."""
        output = format_result(FileResult(Path("a/b.snupkg"), "binary/octet-stream", "b.snupkg"))
        assert output.startswith("200 ")
        assert "b.snupkg" in output
        assert "binary/octet-stream" in output

    def test_format_not_found(self):
        """Test formatting a not-found result."""
        assert format_result(NotFoundResult("gone")) == "404 gone"


class TestMain:
    """Tests for main()."""

    def test_no_command_shows_help(self, capsys):
        """Test that running without a command prints help."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_name(self, capsys):
        """Test the name command."""
        assert main(["name", "Newtonsoft.Json", "12.0.3"]) == 0

        output = capsys.readouterr().out
        assert "symbol-packages" in output
        assert "newtonsoft.json.12.0.3.snupkg" in output

    def test_name_invalid(self, capsys):
        """Test the name command with a blank id."""
        assert main(["name", " ", "1.0.0"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_download_found(self, storage_dir, capsys):
        """Test downloading a stored symbol package."""
        code = main(
            ["download", "Newtonsoft.Json", "12.0.3", "--storage-dir", str(storage_dir)]
        )

        assert code == 0
        assert "newtonsoft.json.12.0.3.snupkg" in capsys.readouterr().out

    def test_download_not_found(self, storage_dir, capsys):
        """Test downloading a missing symbol package."""
        code = main(["download", "Foo", "1.0.0", "--storage-dir", str(storage_dir)])

        assert code == 1
        assert capsys.readouterr().out.startswith("404")

    def test_download_blob_redirect(self, capsys):
        """Test redirect output using the request scheme."""
        code = main(
            [
                "download",
                "Foo",
                "1.0.0",
                "--blob-url",
                "https://blobs.example.org",
                "--request-url",
                "http://www.example.org/api/v2/symbolpackage/Foo/1.0.0",
                "--no-check",
            ]
        )

        assert code == 0
        assert capsys.readouterr().out.strip() == (
            "302 -> http://blobs.example.org/symbol-packages/foo.1.0.0.snupkg"
        )

    def test_download_invalid_blob_url(self, capsys):
        """Test that an invalid blob URL is reported."""
        code = main(["download", "Foo", "1.0.0", "--blob-url", "ftp://x"])

        assert code == 1
        assert "Unsupported blob base URL" in capsys.readouterr().err

    def test_download_storage_unavailable(self, capsys):
        """Test that storage errors are reported."""
        session = Mock(spec=requests.Session)
        session.head = Mock(side_effect=requests.ConnectionError("refused"))

        with patch("symbolstore.providers.blob.requests.Session", return_value=session):
            with patch("time.sleep"):
                code = main(
                    ["download", "Foo", "1.0.0", "--blob-url", "https://blobs.example.org"]
                )

        assert code == 1
        assert "unavailable" in capsys.readouterr().err
