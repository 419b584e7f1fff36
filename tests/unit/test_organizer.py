"""Tests for the organize pipeline."""

import pytest
from pathlib import Path
from unittest.mock import patch

from vidsort.classification.resolution import ResolutionBucket
from vidsort.exceptions import InvalidSourceDirectoryError, RelocationError
from vidsort.models.report import MoveStatus
from vidsort.models.video import ProbeResult
from vidsort.pipeline.organizer import (
    codec_directory_name,
    organize_directory,
    organize_file,
    target_directory,
)


class TestTargetDirectory:
    """Tests for destination naming."""

    def test_layout(self):
        """output/<codec>/<bucket>_<W>x<H>."""
        result = target_directory(Path("/out"), "h264", ResolutionBucket.FHD_1080P, 1920, 1080)

        assert result == Path("/out/h264/1080p_1920x1080")

    def test_codec_case_preserved(self):
        """Codec directory keeps the reported case."""
        assert codec_directory_name("MPEG4") == "MPEG4"

    def test_codec_separator_replaced(self):
        """Path separators in codec names cannot create nested directories."""
        assert codec_directory_name("h264/avc") == "h264_avc"


class TestOrganizeFile:
    """Tests for organize_file function."""

    def test_moves_valid_file(self, temp_video_file, tmp_path, make_prober):
        """A valid file lands in its codec/resolution directory."""
        output = tmp_path / "out"
        prober = make_prober({
            temp_video_file.name: ProbeResult(codec="vp9", width=1280, height=720),
        })

        outcome = organize_file(temp_video_file, output, prober)

        assert outcome.status is MoveStatus.MOVED
        assert outcome.destination == output / "vp9" / "720p_1280x720" / temp_video_file.name
        assert outcome.destination.exists()
        assert not temp_video_file.exists()

    def test_probe_failure_leaves_file(self, temp_video_file, tmp_path, make_prober):
        """A failed probe never moves the file."""
        outcome = organize_file(temp_video_file, tmp_path / "out", make_prober({}))

        assert outcome.status is MoveStatus.FAILED_PROBE
        assert outcome.reason == "no video stream"
        assert temp_video_file.exists()
        assert not (tmp_path / "out").exists()

    def test_conflict_never_overwrites(self, temp_video_file, tmp_path, make_prober):
        """An existing destination file is kept and the move fails."""
        output = tmp_path / "out"
        existing = output / "h264" / "1080p_1920x1080" / temp_video_file.name
        existing.parent.mkdir(parents=True)
        existing.write_bytes(b"original")
        prober = make_prober({
            temp_video_file.name: ProbeResult(codec="h264", width=1920, height=1080),
        })

        outcome = organize_file(temp_video_file, output, prober)

        assert outcome.status is MoveStatus.FAILED_MOVE
        assert existing.read_bytes() == b"original"
        assert temp_video_file.exists()

    def test_move_error_is_recorded(self, temp_video_file, tmp_path, make_prober):
        """Relocation errors become FAILED_MOVE outcomes."""
        prober = make_prober({
            temp_video_file.name: ProbeResult(codec="h264", width=1920, height=1080),
        })
        with patch("vidsort.pipeline.organizer.relocate_file",
                   side_effect=RelocationError("Permission denied")):
            outcome = organize_file(temp_video_file, tmp_path / "out", prober)

        assert outcome.status is MoveStatus.FAILED_MOVE
        assert "Permission denied" in outcome.reason
        assert outcome.bucket is ResolutionBucket.FHD_1080P


class TestOrganizeDirectory:
    """Tests for organize_directory function."""

    def test_organizes_library(self, video_library, fake_prober, tmp_path):
        """Valid files move, invalid files stay."""
        output = tmp_path / "organized"

        report = organize_directory(
            video_library, output, confirmed=True,
            prober=fake_prober, report_path=tmp_path / "org.txt",
        )

        assert report.total == 3
        assert report.processed == 2
        assert report.failed == 1
        assert (output / "h264" / "4K_3840x2160" / "movie_4k.mp4").exists()
        assert (output / "hevc" / "1080p_1920x1080" / "episode.mkv").exists()
        assert (video_library / "broken.avi").exists()
        assert not (video_library / "movie_4k.mp4").exists()

    def test_not_confirmed_touches_nothing(self, video_library, fake_prober, tmp_path):
        """Without consent nothing is moved, created or written."""
        output = tmp_path / "organized"
        report_path = tmp_path / "org.txt"
        before = sorted(p.name for p in video_library.iterdir())

        report = organize_directory(
            video_library, output, confirmed=False,
            prober=fake_prober, report_path=report_path,
        )

        assert report.confirmed is False
        assert report.total == 0
        assert sorted(p.name for p in video_library.iterdir()) == before
        assert not output.exists()
        assert not report_path.exists()
        assert fake_prober.calls == []

    def test_second_run_finds_only_failures(self, video_library, fake_prober, tmp_path):
        """After a run only unprocessable files remain in the source."""
        output = tmp_path / "organized"
        organize_directory(video_library, output, confirmed=True,
                           prober=fake_prober, report_path=tmp_path / "1.txt")

        second = organize_directory(video_library, output, confirmed=True,
                                    prober=fake_prober, report_path=tmp_path / "2.txt")

        assert second.total == 1
        assert second.processed == 0

    def test_files_conserved(self, video_library, fake_prober, tmp_path):
        """Every file is either still in source or in exactly one place in output."""
        output = tmp_path / "organized"
        names = {p.name for p in video_library.iterdir()}

        organize_directory(video_library, output, confirmed=True,
                           prober=fake_prober, report_path=tmp_path / "org.txt")

        remaining = {p.name for p in video_library.iterdir()}
        moved = [p.name for p in output.rglob("*") if p.is_file()]
        assert remaining | set(moved) == names
        assert len(moved) == len(set(moved))
        assert not remaining & set(moved)

    def test_report_lists_folder_structure(self, video_library, fake_prober, tmp_path):
        """The artifact includes moved files and the output tree."""
        output = tmp_path / "organized"
        report_path = tmp_path / "org.txt"

        report = organize_directory(video_library, output, confirmed=True,
                                    prober=fake_prober, report_path=report_path)

        text = report_path.read_text(encoding="utf-8")
        assert "VIDEO FILE ORGANIZATION REPORT" in text
        assert "movie_4k.mp4 (3840x2160)" in text
        assert str(output / "hevc" / "1080p_1920x1080") in text
        assert output / "h264" in report.directory_tree

    def test_invalid_source(self, tmp_path, fake_prober):
        """A missing source aborts before anything happens."""
        with pytest.raises(InvalidSourceDirectoryError):
            organize_directory(tmp_path / "missing", tmp_path / "out", confirmed=True,
                               prober=fake_prober, report_path=tmp_path / "r.txt")

        assert not (tmp_path / "out").exists()

    def test_output_not_creatable(self, video_library, fake_prober, tmp_path):
        """An output path that cannot be created is a precondition failure."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file")

        with pytest.raises(RelocationError):
            organize_directory(video_library, blocker / "out", confirmed=True,
                               prober=fake_prober, report_path=tmp_path / "r.txt")

        assert len(list(video_library.iterdir())) == 3

    def test_callback_per_outcome(self, video_library, fake_prober, tmp_path):
        """on_outcome is called once per file."""
        seen = []

        organize_directory(video_library, tmp_path / "out", confirmed=True,
                           prober=fake_prober, report_path=tmp_path / "r.txt",
                           on_outcome=seen.append)

        assert [o.status for o in seen].count(MoveStatus.MOVED) == 2
        assert len(seen) == 3

    def test_interrupt_writes_partial_report(self, video_library, tmp_path):
        """An interrupted run keeps finished moves and still writes a full artifact."""
        class InterruptingProber:
            name = "interrupting"

            def __init__(self):
                self.count = 0

            def is_available(self):
                return True

            def probe(self, path):
                self.count += 1
                if self.count == 2:
                    raise KeyboardInterrupt
                return ProbeResult(codec="h264", width=1920, height=1080)

        output = tmp_path / "organized"
        report_path = tmp_path / "org.txt"

        with pytest.raises(KeyboardInterrupt):
            organize_directory(video_library, output, confirmed=True,
                               prober=InterruptingProber(), report_path=report_path)

        assert (output / "h264" / "1080p_1920x1080" / "broken.avi").exists()
        assert (video_library / "episode.mkv").exists()
        assert (video_library / "movie_4k.mp4").exists()
        lines = report_path.read_text(encoding="utf-8").splitlines()
        assert any("interrupted" in line for line in lines)
        assert "Total files found: 1" in lines
        assert "Successfully moved: 1" in lines
        tree = lines[lines.index("FOLDER STRUCTURE:") + 1:]
        assert str(output / "h264" / "1080p_1920x1080") in tree
