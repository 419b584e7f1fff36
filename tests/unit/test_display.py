"""Tests for display functions."""

import pytest
from pathlib import Path
from unittest.mock import patch

from vidsort.classification.resolution import ResolutionBucket
from vidsort.models.report import MoveOutcome, MoveStatus, OrganizationReport, ScanReport
from vidsort.ui.display import (
    build_output_tree,
    display_move_outcome,
    display_organization_summary,
    display_probe_install_hints,
    display_scan_summary,
    format_file_count,
)


class TestFormatFileCount:
    """Tests for format_file_count function."""

    @pytest.mark.parametrize("count,expected", [
        (0, "0 files"),
        (1, "1 file"),
        (5, "5 files"),
    ])
    def test_pluralization(self, count, expected):
        """Pluralizes everything but one."""
        assert format_file_count(count) == expected


class TestBuildOutputTree:
    """Tests for build_output_tree function."""

    def test_one_node_per_codec(self):
        """Codecs become child nodes holding their files."""
        tree = build_output_tree(Path("/out"), {
            "hevc": ["b.mkv (3840x2160)"],
            "h264": ["a.mkv (1920x1080)", "c.mp4 (1280x720)"],
        })

        assert len(tree.children) == 2
        assert "h264" in str(tree.children[0].label)
        assert len(tree.children[0].children) == 2

    def test_markup_in_names_is_escaped(self):
        """Filenames with brackets do not break Rich markup."""
        tree = build_output_tree(Path("/out"), {"h264": ["[group] a.mkv (1920x1080)"]})

        assert "\\[group]" in str(tree.children[0].children[0].label)


class TestDisplayMoveOutcome:
    """Tests for display_move_outcome function."""

    def test_probe_failure(self):
        """Probe failures are reported as skipped."""
        outcome = MoveOutcome(status=MoveStatus.FAILED_PROBE, source=Path("/src/a.avi"))
        with patch("vidsort.ui.display.console") as mock_console:
            display_move_outcome(outcome)

        printed = " ".join(str(c[0][0]) for c in mock_console.print.call_args_list)
        assert "skipping" in printed

    def test_moved(self):
        """Moves show the target directory."""
        outcome = MoveOutcome(
            status=MoveStatus.MOVED,
            source=Path("/src/a.mkv"),
            destination=Path("/out/h264/720p_1280x720/a.mkv"),
            codec="h264", width=1280, height=720, bucket=ResolutionBucket.HD_720P,
        )
        with patch("vidsort.ui.display.console") as mock_console:
            display_move_outcome(outcome)

        printed = " ".join(str(c[0][0]) for c in mock_console.print.call_args_list)
        assert "720p (1280x720)" in printed
        assert "Moved successfully" in printed


class TestSummaries:
    """Tests for summary displays."""

    def test_scan_summary(self):
        """Scan summary shows totals and the report path."""
        with patch("vidsort.ui.display.console") as mock_console:
            display_scan_summary(ScanReport(source_dir=Path(".")), Path("report.txt"))

        mock_console.rule.assert_called_once()
        mock_console.print_success.assert_called_once()

    def test_cancelled_organization(self):
        """Unconfirmed runs only print a cancellation notice."""
        report = OrganizationReport(source_dir=Path("."), output_dir=Path("out"), confirmed=False)
        with patch("vidsort.ui.display.console") as mock_console:
            display_organization_summary(report, Path("report.txt"))

        mock_console.print_warning.assert_called_once_with("Operation cancelled.")
        mock_console.rule.assert_not_called()

    def test_install_hints_for_ffprobe(self):
        """ffprobe hints mention ffmpeg."""
        with patch("vidsort.ui.display.console") as mock_console:
            display_probe_install_hints("ffprobe")

        content = mock_console.print_panel.call_args[0][0]
        assert "ffmpeg" in content
