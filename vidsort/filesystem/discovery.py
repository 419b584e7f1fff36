"""File discovery functions for finding video files."""

from pathlib import Path
from typing import List

from loguru import logger

from vidsort.config.settings import VIDEO_EXTENSIONS
from vidsort.exceptions import InvalidSourceDirectoryError


def is_video_file(path: Path) -> bool:
    """Check if path is a regular file with a recognized video extension."""
    return path.suffix.lower() in VIDEO_EXTENSIONS and path.is_file()


def require_directory(directory: Path) -> Path:
    """
    Ensure the given path is an existing directory.

    Args:
        directory: Path to check.

    Returns:
        The same path.

    Raises:
        InvalidSourceDirectoryError: If the path is missing or not a directory.
    """
    if not directory.exists():
        raise InvalidSourceDirectoryError(f"Directory {directory} does not exist")
    if not directory.is_dir():
        raise InvalidSourceDirectoryError(f"{directory} is not a directory")
    return directory


def find_video_files(directory: Path) -> List[Path]:
    """
    List video files directly inside directory (no recursion).

    Args:
        directory: Directory to search in.

    Returns:
        Paths of matching files, sorted by filename.
    """
    require_directory(directory)

    files = []
    try:
        for entry in directory.iterdir():
            if is_video_file(entry):
                files.append(entry)
    except OSError as e:
        logger.warning(f"Filesystem access error for {directory}: {e}")

    files.sort(key=lambda path: path.name)
    logger.debug(f"{len(files)} video files found in {directory}")
    return files


def count_videos(directory: Path) -> int:
    """
    Count video files directly inside directory.

    Args:
        directory: Directory to count files in.

    Returns:
        Number of video files, 0 if the directory is unusable.
    """
    try:
        return len(find_video_files(directory))
    except InvalidSourceDirectoryError:
        return 0
