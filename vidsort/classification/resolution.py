"""Resolution bucket classification from pixel height."""

from enum import Enum
from typing import Tuple


class ResolutionBucket(Enum):
    """
    Resolution categories, ordered from highest to lowest.

    Each member carries its label and the minimum height (inclusive) that
    falls into it. A bucket covers heights up to, but excluding, the
    minimum of the bucket above; 4K is unbounded.
    """

    UHD_4K = ("4K", 2160)
    QHD_2K = ("2K", 1440)
    FHD_1080P = ("1080p", 1080)
    HD_720P = ("720p", 720)
    SD_480P = ("480p", 480)
    SD = ("SD", 0)

    def __init__(self, label: str, min_height: int) -> None:
        self.label = label
        self.min_height = min_height

    def __str__(self) -> str:
        return self.label


# Evaluated top-down: first threshold the height reaches wins
RESOLUTION_LADDER: Tuple[ResolutionBucket, ...] = tuple(
    sorted(ResolutionBucket, key=lambda bucket: bucket.min_height, reverse=True)
)


def classify(height: int) -> ResolutionBucket:
    """
    Classify a pixel height into a resolution bucket.

    Args:
        height: Video height in pixels (positive integer).

    Returns:
        The ResolutionBucket the height belongs to.

    Raises:
        ValueError: If height is not a positive integer.
    """
    if isinstance(height, bool) or not isinstance(height, int):
        raise ValueError(f"Height must be an integer, got {height!r}")
    if height <= 0:
        raise ValueError(f"Height must be positive, got {height}")

    for bucket in RESOLUTION_LADDER:
        if height >= bucket.min_height:
            return bucket

    # Unreachable: SD has a zero threshold
    return ResolutionBucket.SD


def resolution_label(bucket: ResolutionBucket, width: int, height: int) -> str:
    """Report label, e.g. "1080p (1920x1080)"."""
    return f"{bucket.label} ({width}x{height})"


def directory_label(bucket: ResolutionBucket, width: int, height: int) -> str:
    """Directory name, e.g. "1080p_1920x1080"."""
    return f"{bucket.label}_{width}x{height}"
