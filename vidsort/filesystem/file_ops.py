"""File operations for relocating videos into the organized tree."""

import shutil
from pathlib import Path
from typing import List

from loguru import logger

from vidsort.exceptions import RelocationConflictError, RelocationError


def ensure_directory(directory: Path) -> Path:
    """
    Create directory and its parents if needed.

    Args:
        directory: Directory to create.

    Returns:
        The same path.

    Raises:
        RelocationError: If the directory cannot be created.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RelocationError(f"Cannot create directory {directory}: {e}") from e
    return directory


def relocate_file(source: Path, target_dir: Path) -> Path:
    """
    Move a file into target_dir, keeping its filename.

    Never overwrites: an existing file with the same name is a conflict.
    On any failure the source file is left where it was.

    Args:
        source: File to move.
        target_dir: Directory to move it into (created if missing).

    Returns:
        The new path of the file.

    Raises:
        RelocationConflictError: If target_dir already holds a file with that name.
        RelocationError: If the source is missing or the move fails.
    """
    if not source.is_file():
        raise RelocationError(f"Source file not found: {source}")

    destination = target_dir / source.name
    if destination.exists() or destination.is_symlink():
        raise RelocationConflictError(f"Destination file exists: {destination}")

    ensure_directory(target_dir)

    try:
        shutil.move(str(source), str(destination))
    except OSError as e:
        # A failed cross-device move can leave a partial copy behind
        if destination.exists() and source.exists():
            destination.unlink()
        raise RelocationError(f"Cannot move {source.name} to {target_dir}: {e}") from e

    logger.debug(f"File moved: {source} -> {destination}")
    return destination


def list_directory_tree(root: Path) -> List[Path]:
    """
    List root and every directory below it, sorted.

    Args:
        root: Top of the tree.

    Returns:
        Sorted directory paths, empty if root does not exist.
    """
    if not root.is_dir():
        return []
    directories = [root]
    directories.extend(path for path in root.rglob("*") if path.is_dir())
    return sorted(directories, key=lambda path: str(path))
