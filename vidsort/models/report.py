"""Scan and organization report models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from vidsort.classification.resolution import (
    ResolutionBucket,
    resolution_label,
)
from vidsort.models.statistics import StatisticsAggregator
from vidsort.models.video import ProbeResult, VideoFile


@dataclass(frozen=True)
class ScanRecord:
    """
    Result of probing and classifying one file.

    Attributes:
        video: The file that was probed.
        probe: Probe result (possibly invalid).
        bucket: Resolution bucket, only set for valid probes.
    """

    video: VideoFile
    probe: ProbeResult
    bucket: Optional[ResolutionBucket] = None

    @property
    def is_valid(self) -> bool:
        return self.bucket is not None and self.probe.is_valid

    @property
    def resolution_label(self) -> str:
        """Label such as "1080p (1920x1080)", empty for failed records."""
        if not self.is_valid:
            return ""
        return resolution_label(self.bucket, self.probe.width, self.probe.height)


@dataclass
class ScanReport:
    """
    Aggregate of every ScanRecord produced by one scan.

    Attributes:
        source_dir: Directory that was scanned.
        generated_at: When the scan started.
        records: One record per enumerated file, in enumeration order.
        statistics: Codec and resolution tallies.
        interrupted: True if the scan was cut short by the user.
    """

    source_dir: Path
    generated_at: datetime = field(default_factory=datetime.now)
    records: List[ScanRecord] = field(default_factory=list)
    statistics: StatisticsAggregator = field(default_factory=StatisticsAggregator)
    interrupted: bool = False

    def add(self, record: ScanRecord) -> None:
        """Append a record and update the tallies."""
        self.records.append(record)
        if record.is_valid:
            self.statistics.record(record.probe.codec, record.resolution_label)
        else:
            self.statistics.record_failure()

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def success(self) -> int:
        return self.statistics.success

    @property
    def failed(self) -> int:
        return self.statistics.failed

    @property
    def codec_counts(self) -> Dict[str, int]:
        return dict(self.statistics.codec_counts)

    @property
    def resolution_counts(self) -> Dict[str, int]:
        return dict(self.statistics.resolution_counts)


class MoveStatus(Enum):
    """Terminal status of one file in an organize run."""

    MOVED = "moved"
    FAILED_PROBE = "failed-probe"
    FAILED_MOVE = "failed-move"


@dataclass(frozen=True)
class MoveOutcome:
    """
    What happened to one file during organization.

    Attributes:
        status: Terminal status.
        source: Original path of the file.
        destination: Final path, only set when moved.
        codec: Codec name, when probing succeeded.
        width: Width in pixels, when probing succeeded.
        height: Height in pixels, when probing succeeded.
        bucket: Resolution bucket, when probing succeeded.
        reason: Failure reason for failed outcomes.
    """

    status: MoveStatus
    source: Path
    destination: Optional[Path] = None
    codec: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    bucket: Optional[ResolutionBucket] = None
    reason: Optional[str] = None

    @property
    def filename(self) -> str:
        return self.source.name

    @property
    def is_moved(self) -> bool:
        return self.status is MoveStatus.MOVED

    @property
    def dimensions(self) -> str:
        if self.width is None or self.height is None:
            return ""
        return f"{self.width}x{self.height}"

    @property
    def resolution_label(self) -> str:
        if self.bucket is None or not self.dimensions:
            return ""
        return resolution_label(self.bucket, self.width, self.height)


@dataclass
class OrganizationReport:
    """
    Aggregate of every MoveOutcome produced by one organize run.

    Attributes:
        source_dir: Directory files were taken from.
        output_dir: Root of the codec/resolution hierarchy.
        generated_at: When the run started.
        outcomes: One outcome per enumerated file, in enumeration order.
        directory_tree: Sorted directories under output_dir after the run.
        statistics: Tallies of moved files.
        confirmed: False when the run was declined and nothing was touched.
        interrupted: True if the run was cut short by the user.
    """

    source_dir: Path
    output_dir: Path
    generated_at: datetime = field(default_factory=datetime.now)
    outcomes: List[MoveOutcome] = field(default_factory=list)
    directory_tree: List[Path] = field(default_factory=list)
    statistics: StatisticsAggregator = field(default_factory=StatisticsAggregator)
    confirmed: bool = True
    interrupted: bool = False

    def add(self, outcome: MoveOutcome) -> None:
        """Append an outcome and update the tallies."""
        self.outcomes.append(outcome)
        if outcome.is_moved:
            self.statistics.record(outcome.codec, outcome.resolution_label)
        else:
            self.statistics.record_failure()

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def processed(self) -> int:
        return self.statistics.success

    @property
    def failed(self) -> int:
        return self.statistics.failed

    def outcomes_with_status(self, status: MoveStatus) -> List[MoveOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is status]

    @property
    def files_by_codec(self) -> Dict[str, List[str]]:
        """Codec to "filename (WxH)" entries of moved files, in move order."""
        grouped: Dict[str, List[str]] = {}
        for outcome in self.outcomes_with_status(MoveStatus.MOVED):
            grouped.setdefault(outcome.codec, []).append(
                f"{outcome.filename} ({outcome.dimensions})"
            )
        return grouped
