"""Read-only scan of a directory: probe, classify and report."""

from pathlib import Path
from typing import Callable, Optional

from loguru import logger
from tqdm import tqdm

from vidsort.classification.media_info import FFProbeProber, Prober
from vidsort.classification.resolution import classify
from vidsort.config.settings import SCAN_REPORT_FILENAME
from vidsort.filesystem.discovery import find_video_files, require_directory
from vidsort.models.report import ScanRecord, ScanReport
from vidsort.models.video import VideoFile
from vidsort.reporting.text_report import render_scan_report, write_report

RecordCallback = Callable[[ScanRecord], None]


def scan_file(path: Path, prober: Prober) -> ScanRecord:
    """
    Probe and classify a single file.

    Args:
        path: Video file to scan.
        prober: Probe backend.

    Returns:
        ScanRecord, with no bucket when the probe is invalid.
    """
    video = VideoFile(path)
    probe = prober.probe(path)

    if not probe.is_valid:
        logger.warning(f"Failed to get video info for {video.filename}: {probe.error}")
        return ScanRecord(video=video, probe=probe)

    record = ScanRecord(video=video, probe=probe, bucket=classify(probe.height))
    logger.info(
        f"{video.filename}: codec {probe.codec} | resolution {record.resolution_label}"
    )
    return record


def scan_directory(
    source_dir: Path,
    prober: Optional[Prober] = None,
    report_path: Optional[Path] = None,
    on_record: Optional[RecordCallback] = None,
    show_progress: bool = False
) -> ScanReport:
    """
    Scan video files in source_dir and write a scan report.

    Files are never modified. A file that cannot be probed is recorded
    as failed and the scan goes on with the next one.

    Args:
        source_dir: Directory to scan (not recursive).
        prober: Probe backend, ffprobe by default.
        report_path: Report artifact path, video_scan_report.txt by default.
        on_record: Called with each record as soon as it is produced.
        show_progress: If True, display a tqdm progress bar.

    Returns:
        The ScanReport for this run.

    Raises:
        InvalidSourceDirectoryError: If source_dir is not an existing directory.
    """
    require_directory(source_dir)
    prober = prober or FFProbeProber()
    report_path = report_path or Path(SCAN_REPORT_FILENAME)

    files = find_video_files(source_dir)
    report = ScanReport(source_dir=source_dir)
    logger.info(f"Scanning {len(files)} video files in {source_dir}")

    try:
        with tqdm(files, desc="Scanning videos", unit="file", disable=not show_progress) as pbar:
            for path in pbar:
                record = scan_file(path, prober)
                report.add(record)
                if on_record:
                    on_record(record)
    except KeyboardInterrupt:
        report.interrupted = True
        logger.warning(f"Scan interrupted after {report.total} of {len(files)} files")
        raise
    finally:
        write_report(render_scan_report(report), report_path)

    logger.info(
        f"Scan complete: {report.total} files, {report.success} ok, {report.failed} failed"
    )
    return report
