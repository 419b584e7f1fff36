"""Tests for CLI argument parsing."""

import pytest
from pathlib import Path

from vidsort.config.cli import (
    CLIArgs,
    args_to_cli_args,
    create_parser,
    parse_arguments,
    validate_source_directory,
)
from vidsort.config.settings import DEFAULT_OUTPUT_DIR, PROBE_TIMEOUT_SECONDS


class TestCreateParser:
    """Tests for create_parser function."""

    def test_returns_parser(self):
        """Returns an ArgumentParser named after the tool."""
        parser = create_parser()
        assert parser.prog == "vidsort"

    def test_rejects_unknown_mode(self):
        """Unknown modes exit with an argparse error."""
        with pytest.raises(SystemExit):
            parse_arguments(["shuffle"])

    def test_rejects_unknown_backend(self):
        """Unknown backends exit with an argparse error."""
        with pytest.raises(SystemExit):
            parse_arguments(["scan", "--backend", "exiftool"])


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_defaults(self):
        """Without arguments the interactive menu runs on the current directory."""
        cli_args = args_to_cli_args(parse_arguments([]))

        assert cli_args.mode == "menu"
        assert cli_args.is_interactive
        assert cli_args.source_dir == Path(".")
        assert cli_args.output_dir == DEFAULT_OUTPUT_DIR
        assert cli_args.backend == "ffprobe"
        assert cli_args.timeout == PROBE_TIMEOUT_SECONDS
        assert not cli_args.assume_yes

    def test_organize_with_options(self):
        """Options map onto CLIArgs fields."""
        namespace = parse_arguments([
            "organize", "-i", "/videos", "-o", "/sorted",
            "--report-dir", "/reports", "--backend", "mediainfo",
            "--timeout", "5", "-y", "-q", "--debug",
        ])
        cli_args = args_to_cli_args(namespace)

        assert cli_args == CLIArgs(
            mode="organize",
            source_dir=Path("/videos"),
            output_dir=Path("/sorted"),
            report_dir=Path("/reports"),
            backend="mediainfo",
            timeout=5.0,
            assume_yes=True,
            quiet=True,
            debug=True,
        )
        assert not cli_args.is_interactive

    def test_custom_ffprobe(self):
        """--ffprobe overrides the executable."""
        cli_args = args_to_cli_args(parse_arguments(["scan", "--ffprobe", "/opt/bin/ffprobe"]))
        assert cli_args.ffprobe == "/opt/bin/ffprobe"


class TestValidateSourceDirectory:
    """Tests for validate_source_directory function."""

    def test_existing_directory(self, tmp_path):
        """Existing directories pass."""
        assert validate_source_directory(tmp_path) is True

    def test_missing_directory(self, tmp_path):
        """Missing directories fail."""
        assert validate_source_directory(tmp_path / "missing") is False

    def test_file_is_not_directory(self, temp_video_file):
        """Files fail."""
        assert validate_source_directory(temp_video_file) is False
