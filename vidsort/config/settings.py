"""Configuration settings and constants for the vidsort package."""

from pathlib import Path
from typing import Dict, Set

# Video container extensions recognized by the scanner (matched case-insensitively)
VIDEO_EXTENSIONS: Set[str] = {
    ".mp4", ".mkv", ".avi", ".mov", ".wmv", ".flv", ".webm", ".m4v", ".mpg", ".mpeg"
}

# Default directories
DEFAULT_SOURCE_DIR = Path('.')
DEFAULT_OUTPUT_DIR = Path('./organized_videos')

# Report artifacts, written fresh on every run
SCAN_REPORT_FILENAME = "video_scan_report.txt"
ORGANIZATION_REPORT_FILENAME = "video_organization_report.txt"

# Probing
PROBE_BACKENDS: Set[str] = {"ffprobe", "mediainfo"}
DEFAULT_PROBE_BACKEND = "ffprobe"
FFPROBE_EXECUTABLE = "ffprobe"
PROBE_TIMEOUT_SECONDS: float = 30.0

# Shown when the probing tool is missing; installation itself is left to the user
PROBE_INSTALL_HINTS: Dict[str, str] = {
    "macOS": "brew install ffmpeg",
    "Ubuntu/Debian": "sudo apt install ffmpeg",
    "Fedora": "sudo dnf install ffmpeg",
    "Arch": "sudo pacman -S ffmpeg",
    "Other": "https://ffmpeg.org/download.html",
}

# Log file
LOG_FILENAME = "vidsort.log"
