"""
Tests for unitlex-tokens - Definitions File Token Dump
======================================================

These tests run the command through click's CliRunner in an isolated
filesystem.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from unitlex import __version__
from unitlex.cli.errors import ExitCode
from unitlex.cli.tokens import main


@pytest.fixture
def runner(monkeypatch):
    for name in (
        "UNITLEX_DEFINITIONS",
        "UNITLEX_ENCODING",
        "UNITLEX_COMMENT_CHAR",
        "UNITLEX_MAX_ERRORS",
        "UNITLEX_STRICT",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


class TestTokenDump:
    """Test the default text rendering."""

    def test_render_file(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("foot 12 inch  # imperial\nkg*m/s^2\n")
            result = runner.invoke(main, ["units.txt"])
            assert result.exit_code == 0, result.output
            assert result.output == "foot 12 inch \nkg *m /s ^2 \n"

    def test_default_definitions_file(self, runner):
        with runner.isolated_filesystem():
            Path("definitions.units").write_text("m !\n")
            result = runner.invoke(main, [])
            assert result.exit_code == 0, result.output
            assert result.output == "m !\n"

    def test_definitions_from_environment(self, runner, monkeypatch):
        with runner.isolated_filesystem():
            Path("other.units").write_text("s !")
            monkeypatch.setenv("UNITLEX_DEFINITIONS", "other.units")
            result = runner.invoke(main, [])
            assert result.exit_code == 0, result.output
            assert "s !" in result.output

    def test_list_format(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("c 299792458 m/s")
            result = runner.invoke(main, ["units.txt", "-f", "list"])
            assert result.exit_code == 0, result.output
            lines = result.output.splitlines()
            assert lines[0] == "1:1     IDENT     'c'"
            assert lines[1] == "1:3     NUMBER    299792458"

    def test_comment_char_option(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("m ; meter")
            result = runner.invoke(main, ["units.txt", "--comment-char", ";"])
            assert result.exit_code == 0, result.output
            assert result.output == "m \n"

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestLexicalErrors:
    """Test error reporting policies."""

    def test_errors_reported_but_not_fatal(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("a @ b\n")
            result = runner.invoke(main, ["units.txt"])
            assert result.exit_code == 0
            assert "<error: unexpected character '@'>" in result.output
            assert "units.txt:1:3: error: unexpected character '@'" in result.output
            assert "1 error" in result.output

    def test_strict_mode_fails(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("a\nb @ c\n")
            result = runner.invoke(main, ["--strict", "units.txt"])
            assert result.exit_code == ExitCode.LEXICAL_ERROR
            assert "units.txt:2:3: error: unexpected character '@'" in result.output

    def test_strict_from_environment(self, runner, monkeypatch):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("@")
            monkeypatch.setenv("UNITLEX_STRICT", "1")
            result = runner.invoke(main, ["units.txt"])
            assert result.exit_code == ExitCode.LEXICAL_ERROR

    def test_strict_clean_file_succeeds(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("m !\n")
            result = runner.invoke(main, ["--strict", "units.txt"])
            assert result.exit_code == 0, result.output

    def test_max_errors(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("@@@@@")
            result = runner.invoke(main, ["units.txt", "--max-errors", "2"])
            assert result.exit_code == 0
            assert "2 errors (stopped after limit)" in result.output

    def test_max_errors_exactly_reached(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("@@")
            result = runner.invoke(main, ["units.txt", "--max-errors", "2"])
            assert result.exit_code == 0
            assert "2 errors" in result.output
            assert "stopped after limit" not in result.output


class TestInvalidInput:
    """Test exit codes for bad invocations."""

    def test_missing_file(self, runner):
        with runner.isolated_filesystem():
            result = runner.invoke(main, ["missing.units"])
            assert result.exit_code == ExitCode.INVALID_ARGS
            assert "Error:" in result.output

    def test_bad_comment_char(self, runner):
        with runner.isolated_filesystem():
            Path("units.txt").write_text("m")
            result = runner.invoke(main, ["units.txt", "--comment-char", "*"])
            assert result.exit_code == ExitCode.LEXICAL_ERROR
            assert "Scan error:" in result.output

    def test_invalid_bytes(self, runner):
        """Undecodable bytes are replaced and reported as lexical errors."""
        with runner.isolated_filesystem():
            Path("units.txt").write_bytes(b"m \xfe\n")
            result = runner.invoke(main, ["units.txt"])
            assert result.exit_code == 0
            assert "1 error" in result.output
