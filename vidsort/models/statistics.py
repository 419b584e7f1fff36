"""Per-run codec and resolution counters."""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple


def _sort_counts(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


@dataclass
class StatisticsAggregator:
    """
    Running tallies for one scan or organize invocation.

    Resolution keys include the literal dimensions ("1080p (1920x1080)"),
    so files in the same bucket with different sizes are counted apart.

    Attributes:
        codec_counts: Codec name to number of files.
        resolution_counts: Resolution label to number of files.
        failed: Number of files that could not be classified or moved.
    """

    codec_counts: Dict[str, int] = field(default_factory=dict)
    resolution_counts: Dict[str, int] = field(default_factory=dict)
    failed: int = 0

    def record(self, codec: str, resolution: str) -> None:
        """Count one successfully handled file."""
        self.codec_counts[codec] = self.codec_counts.get(codec, 0) + 1
        self.resolution_counts[resolution] = self.resolution_counts.get(resolution, 0) + 1

    def record_failure(self) -> None:
        """Count one failed file."""
        self.failed += 1

    @property
    def success(self) -> int:
        return sum(self.codec_counts.values())

    @property
    def total(self) -> int:
        return self.success + self.failed

    def sorted_codecs(self) -> List[Tuple[str, int]]:
        """Codec counts, most frequent first, ties by name."""
        return _sort_counts(self.codec_counts)

    def sorted_resolutions(self) -> List[Tuple[str, int]]:
        """Resolution counts, most frequent first, ties by label."""
        return _sort_counts(self.resolution_counts)
