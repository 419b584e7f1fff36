"""Configuration and CLI handling."""

from vidsort.config.settings import (
    VIDEO_EXTENSIONS,
    DEFAULT_SOURCE_DIR,
    DEFAULT_OUTPUT_DIR,
    SCAN_REPORT_FILENAME,
    ORGANIZATION_REPORT_FILENAME,
    PROBE_BACKENDS,
    DEFAULT_PROBE_BACKEND,
    FFPROBE_EXECUTABLE,
    PROBE_TIMEOUT_SECONDS,
    PROBE_INSTALL_HINTS,
    LOG_FILENAME,
)
from vidsort.config.cli import (
    CLIArgs,
    create_parser,
    parse_arguments,
    args_to_cli_args,
    validate_source_directory,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "DEFAULT_SOURCE_DIR",
    "DEFAULT_OUTPUT_DIR",
    "SCAN_REPORT_FILENAME",
    "ORGANIZATION_REPORT_FILENAME",
    "PROBE_BACKENDS",
    "DEFAULT_PROBE_BACKEND",
    "FFPROBE_EXECUTABLE",
    "PROBE_TIMEOUT_SECONDS",
    "PROBE_INSTALL_HINTS",
    "LOG_FILENAME",
    "CLIArgs",
    "create_parser",
    "parse_arguments",
    "args_to_cli_args",
    "validate_source_directory",
]
