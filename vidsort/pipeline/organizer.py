"""Organize a directory into a codec/resolution hierarchy."""

import os
from pathlib import Path
from typing import Callable, Optional

from loguru import logger
from tqdm import tqdm

from vidsort.classification.media_info import FFProbeProber, Prober
from vidsort.classification.resolution import (
    ResolutionBucket,
    classify,
    directory_label,
)
from vidsort.config.settings import ORGANIZATION_REPORT_FILENAME
from vidsort.exceptions import RelocationConflictError, RelocationError
from vidsort.filesystem.discovery import find_video_files, require_directory
from vidsort.filesystem.file_ops import (
    ensure_directory,
    list_directory_tree,
    relocate_file,
)
from vidsort.models.report import MoveOutcome, MoveStatus, OrganizationReport
from vidsort.reporting.text_report import render_organization_report, write_report

OutcomeCallback = Callable[[MoveOutcome], None]


def codec_directory_name(codec: str) -> str:
    """Directory name for a codec, case preserved, path separators replaced."""
    name = codec.replace("/", "_")
    if os.altsep:
        name = name.replace(os.altsep, "_")
    return name


def target_directory(
    output_dir: Path,
    codec: str,
    bucket: ResolutionBucket,
    width: int,
    height: int
) -> Path:
    """
    Destination directory for a file, e.g. output/h264/1080p_1920x1080.

    Args:
        output_dir: Root of the organized tree.
        codec: Codec name as reported by the prober.
        bucket: Resolution bucket of the file.
        width: Width in pixels.
        height: Height in pixels.

    Returns:
        Directory the file belongs in.
    """
    return output_dir / codec_directory_name(codec) / directory_label(bucket, width, height)


def organize_file(path: Path, output_dir: Path, prober: Prober) -> MoveOutcome:
    """
    Probe, classify and move a single file.

    A failed probe or a failed move leaves the file where it was.

    Args:
        path: Video file to organize.
        output_dir: Root of the organized tree.
        prober: Probe backend.

    Returns:
        MoveOutcome describing what happened.
    """
    probe = prober.probe(path)
    if not probe.is_valid:
        reason = probe.error or "Could not read video information"
        logger.warning(f"Failed to get video info for {path.name} - skipping: {reason}")
        return MoveOutcome(status=MoveStatus.FAILED_PROBE, source=path, reason=reason)

    bucket = classify(probe.height)
    target_dir = target_directory(
        output_dir, probe.codec, bucket, probe.width, probe.height
    )
    details = dict(
        source=path,
        codec=probe.codec,
        width=probe.width,
        height=probe.height,
        bucket=bucket,
    )

    try:
        destination = relocate_file(path, target_dir)
    except RelocationConflictError as e:
        logger.error(f"Not moving {path.name}, destination already exists: {e}")
        return MoveOutcome(status=MoveStatus.FAILED_MOVE, reason=str(e), **details)
    except RelocationError as e:
        logger.error(f"Failed to move {path.name}: {e}")
        return MoveOutcome(status=MoveStatus.FAILED_MOVE, reason=str(e), **details)

    logger.info(f"Moved {path.name} -> {target_dir}")
    return MoveOutcome(status=MoveStatus.MOVED, destination=destination, **details)


def organize_directory(
    source_dir: Path,
    output_dir: Path,
    confirmed: bool,
    prober: Optional[Prober] = None,
    report_path: Optional[Path] = None,
    on_outcome: Optional[OutcomeCallback] = None,
    show_progress: bool = False
) -> OrganizationReport:
    """
    Move video files from source_dir into output_dir/<codec>/<bucket>_<W>x<H>/.

    Nothing is touched unless confirmed is True. Files that fail to probe or
    to move stay in place and are recorded as failed; the run always goes on
    with the next file. Existing files at the destination are never replaced.

    Args:
        source_dir: Directory holding the videos (not recursive).
        output_dir: Root of the organized tree (created if missing).
        confirmed: Consent to move files, obtained by the caller.
        prober: Probe backend, ffprobe by default.
        report_path: Report artifact path, video_organization_report.txt by default.
        on_outcome: Called with each outcome as soon as it is produced.
        show_progress: If True, display a tqdm progress bar.

    Returns:
        The OrganizationReport for this run.

    Raises:
        InvalidSourceDirectoryError: If source_dir is not an existing directory.
        RelocationError: If output_dir cannot be created.
    """
    require_directory(source_dir)
    report = OrganizationReport(
        source_dir=source_dir,
        output_dir=output_dir,
        confirmed=confirmed,
    )

    if not confirmed:
        logger.info("Organization cancelled, no files were moved")
        return report

    prober = prober or FFProbeProber()
    report_path = report_path or Path(ORGANIZATION_REPORT_FILENAME)

    files = find_video_files(source_dir)
    ensure_directory(output_dir)
    logger.info(f"Organizing {len(files)} video files from {source_dir} into {output_dir}")

    try:
        with tqdm(files, desc="Organizing videos", unit="file", disable=not show_progress) as pbar:
            for path in pbar:
                outcome = organize_file(path, output_dir, prober)
                report.add(outcome)
                if on_outcome:
                    on_outcome(outcome)
    except KeyboardInterrupt:
        report.interrupted = True
        logger.warning(f"Organization interrupted after {report.total} of {len(files)} files")
        raise
    finally:
        report.directory_tree = list_directory_tree(output_dir)
        write_report(render_organization_report(report), report_path)

    logger.info(
        f"Organization complete: {report.total} files, "
        f"{report.processed} moved, {report.failed} failed"
    )
    return report
