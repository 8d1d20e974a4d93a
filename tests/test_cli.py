"""
Tests for the CLI.

Runs the Typer application in-process with CliRunner.
"""

import pytest
from typer.testing import CliRunner

from cli.main import app
from engine import __version__
from tests.fixtures import SAMPLE_PROJECT

runner = CliRunner()


class TestScanCommand:
    """Tests for `cppscan scan`."""

    def test_scan_directory(self):
        """Test scanning the sample project."""
        result = runner.invoke(app, ["scan", str(SAMPLE_PROJECT)])

        assert result.exit_code == 0
        assert "Scan Complete" in result.stdout
        assert "isZero" in result.stdout
        assert "iostream" in result.stdout

    def test_scan_files(self):
        """Test scanning explicit files."""
        result = runner.invoke(
            app,
            ["scan", str(SAMPLE_PROJECT / "Display.h"), str(SAMPLE_PROJECT / "Main.cpp")],
        )

        assert result.exit_code == 0
        assert "show" in result.stdout

    def test_unsupported_file(self):
        """Test that an unsupported file fails the command."""
        result = runner.invoke(
            app,
            ["scan", str(SAMPLE_PROJECT / "Main.cpp"), str(SAMPLE_PROJECT / "data" / "add_inputs.csv")],
        )

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_malformed_file(self, tmp_path):
        """Test that a malformed file fails the command."""
        bad = tmp_path / "Bad.cpp"
        bad.write_text("#include %vector>\n")

        result = runner.invoke(app, ["scan", str(bad)])

        assert result.exit_code == 1


class TestGraphCommand:
    """Tests for `cppscan graph`."""

    def test_graph(self):
        """Test the include graph of the sample project."""
        result = runner.invoke(app, ["graph", str(SAMPLE_PROJECT)])

        assert result.exit_code == 0
        assert "Include Graph" in result.stdout
        assert "Display" in result.stdout

    def test_graph_with_cycle(self, tmp_path):
        """Test that an include cycle fails the command."""
        (tmp_path / "A.cpp").write_text('#include "B.h"\n')
        (tmp_path / "B.cpp").write_text('#include "A.h"\n')

        result = runner.invoke(app, ["graph", str(tmp_path)])

        assert result.exit_code == 1
        assert "cycle" in result.stdout.lower()


class TestOtherCommands:
    """Tests for `cppscan data` and the global options."""

    def test_data(self):
        """Test showing a CSV data file."""
        result = runner.invoke(app, ["data", str(SAMPLE_PROJECT / "data" / "add_inputs.csv")])

        assert result.exit_code == 0
        assert "abc" in result.stdout

    def test_data_invalid_utf8(self, tmp_path):
        """Test that an undecodable CSV file fails the command cleanly."""
        path = tmp_path / "bad.csv"
        path.write_bytes(b"1,\xff\xfe,3\n")

        result = runner.invoke(app, ["data", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.stdout
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_version(self):
        """Test the version option."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    @pytest.mark.parametrize("args", [[], ["--verbose"]])
    def test_no_command_shows_help(self, args):
        """Test that running without a command prints help."""
        result = runner.invoke(app, args)

        assert result.exit_code == 0
        assert "scan" in result.stdout
