"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import Dict

import pytest

from vidsort.models.video import ProbeResult


class FakeProber:
    """Prober answering from a filename -> ProbeResult mapping."""

    name = "fake"

    def __init__(self, results: Dict[str, ProbeResult], available: bool = True):
        self.results = results
        self.available = available
        self.calls = []

    def probe(self, path: Path) -> ProbeResult:
        self.calls.append(path)
        return self.results.get(path.name, ProbeResult.failed("no video stream"))

    def is_available(self) -> bool:
        return self.available


@pytest.fixture
def sample_probe_results():
    """Probe results for the three-file library."""
    return {
        "movie_4k.mp4": ProbeResult(codec="h264", width=3840, height=2160),
        "episode.mkv": ProbeResult(codec="hevc", width=1920, height=1080),
        "broken.avi": ProbeResult.failed("ffprobe error: Invalid data found"),
    }


@pytest.fixture
def fake_prober(sample_probe_results):
    """Prober backed by sample_probe_results."""
    return FakeProber(sample_probe_results)


@pytest.fixture
def video_library(tmp_path, sample_probe_results):
    """Source directory holding one file per sample probe result."""
    source = tmp_path / "videos"
    source.mkdir()
    for name in sample_probe_results:
        (source / name).write_bytes(b"fake video content " * 100)
    return source


@pytest.fixture
def temp_video_file(tmp_path):
    """Create a temporary video file for testing."""
    video_file = tmp_path / "test_video.mkv"
    video_file.write_bytes(b"fake video content " * 1000)
    return video_file


@pytest.fixture
def make_prober():
    """Factory for FakeProber instances."""
    return FakeProber
