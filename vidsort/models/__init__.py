"""Data models for video sorting."""

from vidsort.models.video import VideoFile, ProbeResult
from vidsort.models.statistics import StatisticsAggregator
from vidsort.models.report import (
    ScanRecord,
    ScanReport,
    MoveStatus,
    MoveOutcome,
    OrganizationReport,
)

__all__ = [
    "VideoFile",
    "ProbeResult",
    "StatisticsAggregator",
    "ScanRecord",
    "ScanReport",
    "MoveStatus",
    "MoveOutcome",
    "OrganizationReport",
]
