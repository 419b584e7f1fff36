"""Filesystem operations for video sorting."""

from vidsort.filesystem.discovery import (
    is_video_file,
    require_directory,
    find_video_files,
    count_videos,
)
from vidsort.filesystem.file_ops import (
    ensure_directory,
    relocate_file,
    list_directory_tree,
)

__all__ = [
    "is_video_file",
    "require_directory",
    "find_video_files",
    "count_videos",
    "ensure_directory",
    "relocate_file",
    "list_directory_tree",
]
