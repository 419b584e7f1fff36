"""Plain-text report artifacts for scan and organize runs."""

import os
from pathlib import Path
from typing import List, Optional

from loguru import logger

from vidsort.models.report import MoveStatus, OrganizationReport, ScanReport
from vidsort.models.statistics import StatisticsAggregator

SEPARATOR = "=" * 40
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _format_file_count(count: int) -> str:
    return f"{count} file{'s' if count != 1 else ''}"


def _breakdown(title: str, statistics: StatisticsAggregator, by_codec: bool) -> List[str]:
    items = statistics.sorted_codecs() if by_codec else statistics.sorted_resolutions()
    lines = [f"{title}:"]
    if not items:
        lines.append("  (none)")
    for key, count in items:
        lines.append(f"  {key}: {_format_file_count(count)}")
    return lines


def _header(title: str, report, output_dir: Optional[Path] = None) -> List[str]:
    lines = [
        title,
        f"Generated: {report.generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"Source Directory: {report.source_dir}",
    ]
    if output_dir is not None:
        lines.append(f"Output Directory: {output_dir}")
    lines.extend([SEPARATOR, ""])
    return lines


def _interrupted_note(interrupted: bool) -> List[str]:
    if not interrupted:
        return []
    return ["NOTE: run interrupted before all files were processed", ""]


def render_scan_report(report: ScanReport) -> List[str]:
    """
    Render a scan report as text lines.

    Args:
        report: Completed (or interrupted) scan report.

    Returns:
        Lines of the report, without trailing newlines.
    """
    lines = _header("VIDEO FILE SCAN REPORT", report)

    for record in report.records:
        lines.append(f"File: {record.video.filename}")
        if record.is_valid:
            lines.append(f"  Codec: {record.probe.codec}")
            lines.append(f"  Resolution: {record.resolution_label}")
            lines.append(f"  Dimensions: {record.probe.dimensions}")
        else:
            lines.append("  Status: ERROR - Could not read video information")
            if record.probe.error:
                lines.append(f"  Reason: {record.probe.error}")
        lines.append("")

    lines.extend([SEPARATOR, "SUMMARY", SEPARATOR])
    lines.extend(_interrupted_note(report.interrupted))
    lines.append(f"Total files scanned: {report.total}")
    lines.append(f"Successfully processed: {report.success}")
    lines.append(f"Failed: {report.failed}")
    lines.append("")
    lines.extend(_breakdown("CODEC BREAKDOWN", report.statistics, by_codec=True))
    lines.append("")
    lines.extend(_breakdown("RESOLUTION BREAKDOWN", report.statistics, by_codec=False))
    return lines


def render_organization_report(report: OrganizationReport) -> List[str]:
    """
    Render an organization report as text lines.

    Args:
        report: Completed (or interrupted) organization report.

    Returns:
        Lines of the report, without trailing newlines.
    """
    lines = _header("VIDEO FILE ORGANIZATION REPORT", report, report.output_dir)

    for outcome in report.outcomes:
        if outcome.status is MoveStatus.MOVED:
            lines.append(f"MOVED: {outcome.filename}")
            lines.append(f"  Codec: {outcome.codec}")
            lines.append(f"  Resolution: {outcome.resolution_label}")
            lines.append(f"  From: {outcome.source}")
            lines.append(f"  To: {outcome.destination}")
        else:
            lines.append(f"FAILED: {outcome.filename}")
            if outcome.status is MoveStatus.FAILED_PROBE:
                lines.append("  Status: failed-probe - Could not read video information")
            else:
                lines.append("  Status: failed-move - Move operation failed")
                lines.append(f"  Codec: {outcome.codec}")
                lines.append(f"  Resolution: {outcome.resolution_label}")
            if outcome.reason:
                lines.append(f"  Reason: {outcome.reason}")
        lines.append("")

    lines.extend([SEPARATOR, "ORGANIZATION SUMMARY", SEPARATOR])
    lines.extend(_interrupted_note(report.interrupted))
    lines.append(f"Total files found: {report.total}")
    lines.append(f"Successfully moved: {report.processed}")
    lines.append(f"Failed: {report.failed}")
    lines.append(
        f"  Probe failures: {len(report.outcomes_with_status(MoveStatus.FAILED_PROBE))}"
    )
    lines.append(
        f"  Move failures: {len(report.outcomes_with_status(MoveStatus.FAILED_MOVE))}"
    )
    lines.append("")
    lines.extend(_breakdown("CODEC BREAKDOWN", report.statistics, by_codec=True))
    lines.append("")
    lines.extend(_breakdown("RESOLUTION BREAKDOWN", report.statistics, by_codec=False))
    lines.append("")

    lines.append("FILES BY CODEC:")
    files_by_codec = report.files_by_codec
    if not files_by_codec:
        lines.append("  (none)")
    for codec in sorted(files_by_codec):
        lines.append(f"[{codec}]")
        lines.extend(f"    - {entry}" for entry in files_by_codec[codec])
    lines.append("")

    lines.append("FOLDER STRUCTURE:")
    lines.extend(str(directory) for directory in report.directory_tree)
    return lines


def write_report(lines: List[str], path: Path) -> Path:
    """
    Write report lines to path as UTF-8, replacing any previous report.

    The text goes to a temporary sibling first and is then renamed over
    the target, so readers never see a partial report.

    Args:
        lines: Report lines.
        path: Destination file.

    Returns:
        The report path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(f".{path.name}.tmp")
    try:
        temp_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise
    logger.info(f"Report saved to: {path}")
    return path
