"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from loguru import logger

from vidsort.config.settings import (
    DEFAULT_SOURCE_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PROBE_BACKEND,
    FFPROBE_EXECUTABLE,
    PROBE_BACKENDS,
    PROBE_TIMEOUT_SECONDS,
)

MODES = ("menu", "scan", "organize")


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        mode: One of "menu", "scan" or "organize".
        source_dir: Directory scanned for video files.
        output_dir: Root of the codec/resolution hierarchy.
        report_dir: Directory where report artifacts are written.
        backend: Probe backend name ("ffprobe" or "mediainfo").
        ffprobe: ffprobe executable name or path.
        timeout: Per-file probe timeout in seconds.
        assume_yes: If True, skip the organize confirmation prompt.
        quiet: If True, show a progress bar instead of per-file lines.
        debug: If True, enable debug logging.
    """

    mode: str = "menu"
    source_dir: Path = DEFAULT_SOURCE_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    report_dir: Path = Path('.')
    backend: str = DEFAULT_PROBE_BACKEND
    ffprobe: str = FFPROBE_EXECUTABLE
    timeout: float = PROBE_TIMEOUT_SECONDS
    assume_yes: bool = False
    quiet: bool = False
    debug: bool = False

    @property
    def is_interactive(self) -> bool:
        """Check if the interactive menu should run."""
        return self.mode == "menu"


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='vidsort',
        description="""
        Scans a directory for video files, reports their codec and resolution,
        and optionally moves them into a codec/resolution folder hierarchy.
        """
    )

    parser.add_argument(
        'mode',
        nargs='?',
        choices=MODES,
        default='menu',
        help="operation to run (default: interactive menu)"
    )

    # Directory arguments
    parser.add_argument(
        '-i', '--input',
        default=str(DEFAULT_SOURCE_DIR),
        help=f"source directory (default: {DEFAULT_SOURCE_DIR})"
    )

    parser.add_argument(
        '-o', '--output',
        default=str(DEFAULT_OUTPUT_DIR),
        help=f"organized output directory (default: {DEFAULT_OUTPUT_DIR})"
    )

    parser.add_argument(
        '--report-dir',
        default='.',
        help="directory for report files (default: current directory)"
    )

    # Probe options
    parser.add_argument(
        '--backend',
        choices=sorted(PROBE_BACKENDS),
        default=DEFAULT_PROBE_BACKEND,
        help=f"metadata probe backend (default: {DEFAULT_PROBE_BACKEND})"
    )

    parser.add_argument(
        '--ffprobe',
        default=FFPROBE_EXECUTABLE,
        help=f"ffprobe executable (default: {FFPROBE_EXECUTABLE})"
    )

    parser.add_argument(
        '--timeout',
        type=float,
        default=PROBE_TIMEOUT_SECONDS,
        help=f"probe timeout per file in seconds (default: {PROBE_TIMEOUT_SECONDS:g})"
    )

    # Mode flags
    parser.add_argument(
        '-y', '--yes',
        action='store_true',
        help="do not ask for confirmation before moving files"
    )

    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help="show a progress bar instead of one line per file"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def validate_source_directory(source_dir: Path) -> bool:
    """
    Check that the source directory exists and is a directory.

    Args:
        source_dir: Directory to validate.

    Returns:
        True if validation passed, False otherwise.
    """
    if not source_dir.exists():
        logger.error(f"Source directory {source_dir} does not exist")
        return False
    if not source_dir.is_dir():
        logger.error(f"Source path {source_dir} is not a directory")
        return False
    return True


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        mode=namespace.mode,
        source_dir=Path(namespace.input),
        output_dir=Path(namespace.output),
        report_dir=Path(namespace.report_dir),
        backend=namespace.backend,
        ffprobe=namespace.ffprobe,
        timeout=namespace.timeout,
        assume_yes=namespace.yes,
        quiet=namespace.quiet,
        debug=namespace.debug,
    )
