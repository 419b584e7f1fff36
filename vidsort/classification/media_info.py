"""Codec and resolution extraction for video files.

Two probe backends are available: ffprobe (the default) and MediaInfo
through pymediainfo. Both collapse every failure mode (missing tool,
timeout, unreadable file, missing stream or field) into an invalid
ProbeResult, so callers never see an exception from a single file.
"""

import json
import shutil
import subprocess
from pathlib import Path
from typing import Any, Optional, Protocol

from loguru import logger

from vidsort.config.settings import (
    DEFAULT_PROBE_BACKEND,
    FFPROBE_EXECUTABLE,
    PROBE_TIMEOUT_SECONDS,
)
from vidsort.exceptions import ProbeFailedError, ProbeUnavailableError
from vidsort.models.video import ProbeResult


class Prober(Protocol):
    """Anything that can read codec and dimensions from a file."""

    name: str

    def probe(self, path: Path) -> ProbeResult:
        ...

    def is_available(self) -> bool:
        ...


def _parse_dimension(value: Any, field_name: str) -> int:
    """
    Convert a raw width/height value to a positive integer.

    Raises:
        ProbeFailedError: If the value is missing, empty or not a positive integer.
    """
    if value is None or str(value).strip() == "":
        raise ProbeFailedError(f"missing {field_name}")
    try:
        number = int(str(value).strip())
    except ValueError:
        raise ProbeFailedError(f"invalid {field_name}: {value!r}")
    if number <= 0:
        raise ProbeFailedError(f"invalid {field_name}: {number}")
    return number


def _build_result(codec: Any, width: Any, height: Any) -> ProbeResult:
    if codec is None or str(codec).strip() == "":
        raise ProbeFailedError("missing codec name")
    return ProbeResult(
        codec=str(codec).strip(),
        width=_parse_dimension(width, "width"),
        height=_parse_dimension(height, "height"),
    )


class FFProbeProber:
    """
    Probe backend running one ffprobe call per file.

    Queries codec name, width and height of the first video stream
    in a single JSON request.

    Attributes:
        executable: ffprobe executable name or path.
        timeout: Seconds before a probe is abandoned.
    """

    name = "ffprobe"

    def __init__(
        self,
        executable: str = FFPROBE_EXECUTABLE,
        timeout: float = PROBE_TIMEOUT_SECONDS
    ) -> None:
        self.executable = executable
        self.timeout = timeout

    def build_command(self, path: Path) -> list:
        return [
            self.executable,
            "-v", "error",
            "-select_streams", "v:0",
            "-show_entries", "stream=codec_name,width,height",
            "-of", "json",
            str(path),
        ]

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def probe(self, path: Path) -> ProbeResult:
        """
        Read codec and dimensions of the first video stream.

        Args:
            path: File to probe.

        Returns:
            A valid ProbeResult, or an invalid one carrying the failure reason.
        """
        try:
            return self._run(path)
        except ProbeFailedError as e:
            logger.debug(f"ffprobe failed for {path.name}: {e}")
            return ProbeResult.failed(str(e))

    def _run(self, path: Path) -> ProbeResult:
        try:
            completed = subprocess.run(
                self.build_command(path),
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise ProbeFailedError(f"ffprobe timed out after {self.timeout:g}s")
        except OSError as e:
            raise ProbeFailedError(f"could not run {self.executable}: {e}")

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip().splitlines()
            detail = stderr[-1] if stderr else f"exit code {completed.returncode}"
            raise ProbeFailedError(f"ffprobe error: {detail}")

        try:
            data = json.loads(completed.stdout or "{}")
        except ValueError:
            raise ProbeFailedError("unreadable ffprobe output")

        streams = data.get("streams") or []
        if not streams:
            raise ProbeFailedError("no video stream")

        stream = streams[0]
        return _build_result(
            stream.get("codec_name"),
            stream.get("width"),
            stream.get("height"),
        )


class MediaInfoProber:
    """
    Probe backend reading the first video track with pymediainfo.

    The codec is the track "format" as MediaInfo names it (e.g. "AVC", "HEVC").
    """

    name = "mediainfo"

    def is_available(self) -> bool:
        try:
            from pymediainfo import MediaInfo
            return bool(MediaInfo.can_parse())
        except (ImportError, OSError) as e:
            logger.debug(f"MediaInfo unavailable: {e}")
            return False

    def probe(self, path: Path) -> ProbeResult:
        try:
            return self._run(path)
        except ProbeFailedError as e:
            logger.debug(f"MediaInfo failed for {path.name}: {e}")
            return ProbeResult.failed(str(e))

    def _run(self, path: Path) -> ProbeResult:
        try:
            from pymediainfo import MediaInfo
            mi = MediaInfo.parse(str(path))
        except Exception as e:
            raise ProbeFailedError(f"MediaInfo error: {e}")

        video_tracks = [track for track in mi.tracks if track.track_type == "Video"]
        if not video_tracks:
            raise ProbeFailedError("no video stream")

        track = video_tracks[0]
        return _build_result(track.format, track.width, track.height)


def create_prober(
    backend: str = DEFAULT_PROBE_BACKEND,
    executable: Optional[str] = None,
    timeout: float = PROBE_TIMEOUT_SECONDS
) -> Prober:
    """
    Build a prober by backend name.

    Args:
        backend: "ffprobe" or "mediainfo".
        executable: ffprobe executable override.
        timeout: Per-file timeout for ffprobe.

    Returns:
        A Prober instance.

    Raises:
        ValueError: If the backend is unknown.
    """
    if backend == "ffprobe":
        return FFProbeProber(executable or FFPROBE_EXECUTABLE, timeout)
    if backend == "mediainfo":
        return MediaInfoProber()
    raise ValueError(f"Unknown probe backend: {backend!r}")


def ensure_probe_available(prober: Prober) -> None:
    """
    Check that the probing tool can be used.

    Raises:
        ProbeUnavailableError: If the tool is missing or unusable.
    """
    if not prober.is_available():
        raise ProbeUnavailableError(f"{prober.name} is not installed or not usable")
    logger.debug(f"{prober.name} is available")


def probe_file(path: Path, prober: Optional[Prober] = None) -> ProbeResult:
    """Probe a single file, with ffprobe unless another prober is given."""
    return (prober or FFProbeProber()).probe(path)
