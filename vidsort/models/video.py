"""Video file and probe result models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class VideoFile:
    """
    A candidate video file found during one scan pass.

    Attributes:
        path: Path to the file as enumerated from the source directory.
    """

    path: Path

    @property
    def filename(self) -> str:
        """Base filename."""
        return self.path.name


@dataclass(frozen=True)
class ProbeResult:
    """
    Metadata read from the first video stream of a file.

    A result is valid only when codec, width and height are all present
    and the dimensions are positive. Anything else marks the file as failed.

    Attributes:
        codec: Codec name as reported by the prober (case preserved).
        width: Width in pixels.
        height: Height in pixels.
        error: Reason the probe failed, if it did.
    """

    codec: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def failed(cls, reason: str) -> "ProbeResult":
        """Build an invalid result carrying the failure reason."""
        return cls(error=reason)

    @property
    def is_valid(self) -> bool:
        """Check that all fields are present and dimensions are positive."""
        return (
            bool(self.codec)
            and self.width is not None
            and self.height is not None
            and self.width > 0
            and self.height > 0
        )

    @property
    def dimensions(self) -> str:
        """Dimensions as "WIDTHxHEIGHT", or an empty string when unknown."""
        if self.width is None or self.height is None:
            return ""
        return f"{self.width}x{self.height}"
