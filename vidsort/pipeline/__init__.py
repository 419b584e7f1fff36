"""Scan and organize pipelines."""

from vidsort.pipeline.scanner import (
    scan_file,
    scan_directory,
)
from vidsort.pipeline.organizer import (
    codec_directory_name,
    target_directory,
    organize_file,
    organize_directory,
)

__all__ = [
    "scan_file",
    "scan_directory",
    "codec_directory_name",
    "target_directory",
    "organize_file",
    "organize_directory",
]
