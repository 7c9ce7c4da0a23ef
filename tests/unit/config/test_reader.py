"""Tests for configuration file reader."""

from unittest.mock import patch

import pytest
from pathlib import Path

from compose_options.config.reader import ConfigFileReader
from compose_options.exceptions import DocumentParseError
from compose_options.loader import ConfigFile


class TestConfigFileReader:
    """Tests for ConfigFileReader class."""

    def test_reads_files_in_order(self, project_dir: Path, write_compose):
        """Test that one ConfigFile is returned per path, in order."""
        base = write_compose(project_dir, "compose.yaml", "services:\n  web:\n    image: nginx\n")
        override = write_compose(project_dir, "override.yaml", "services:\n  web:\n    ports: ['80:80']\n")

        files = ConfigFileReader().read([str(base), str(override)])

        assert files == [
            ConfigFile(filename=str(base), config={"services": {"web": {"image": "nginx"}}}),
            ConfigFile(filename=str(override), config={"services": {"web": {"ports": ["80:80"]}}}),
        ]

    def test_reads_stdin_without_touching_filesystem(self, stdin_factory):
        """Test that '-' is read from the injected stream only."""
        reader = ConfigFileReader(stdin=stdin_factory("version: '1'"))

        with patch("builtins.open", side_effect=AssertionError("filesystem accessed")):
            files = reader.read(["-"])

        assert files == [ConfigFile(filename="-", config={"version": "1"})]

    def test_stdin_mixed_with_files(self, project_dir: Path, write_compose, stdin_factory):
        """Test that '-' is handled per entry among real paths."""
        path = write_compose(project_dir, content="services: {a: {}}\n")
        reader = ConfigFileReader(stdin=stdin_factory("services: {b: {}}\n"))

        files = reader.read([str(path), "-"])

        assert [f.filename for f in files] == [str(path), "-"]
        assert files[1].config == {"services": {"b": {}}}

    def test_parse_error_surfaces_unchanged(self, project_dir: Path, write_compose):
        """Test that parser errors are not wrapped into path errors."""
        path = write_compose(project_dir, content="services: [unclosed\n")

        with pytest.raises(DocumentParseError, match="Failed to parse") as exc_info:
            ConfigFileReader().read([str(path)])

        assert exc_info.value.filename == str(path)

    def test_stops_at_first_failure(self, project_dir: Path, write_compose, mocker):
        """Test that later paths are not read after a failure."""
        bad = write_compose(project_dir, "bad.yaml", "[unclosed\n")
        good = write_compose(project_dir, "good.yaml")
        parser = mocker.Mock(side_effect=DocumentParseError("boom"))

        with pytest.raises(DocumentParseError):
            ConfigFileReader(parser=parser).read([str(bad), str(good)])

        parser.assert_called_once()

    def test_missing_file_raises_os_error(self, project_dir: Path):
        """Test that an unreadable path propagates as an OSError."""
        with pytest.raises(FileNotFoundError):
            ConfigFileReader().read([str(project_dir / "gone.yaml")])

    def test_injected_parser_receives_bytes_and_name(self, project_dir: Path, write_compose, mocker):
        """Test that the parser gets raw bytes and the path it came from."""
        path = write_compose(project_dir, content="x: 1\n")
        parser = mocker.Mock(return_value={"x": 1})

        ConfigFileReader(parser=parser).read([str(path)])

        parser.assert_called_once_with(b"x: 1\n", filename=str(path))
