"""
vidsort - Video file sorter by codec and resolution.

Scans a directory of video files and:
- Extracts codec and pixel dimensions via ffprobe (or MediaInfo)
- Classifies each file into a resolution bucket (4K, 2K, 1080p, 720p, 480p, SD)
- Writes a scan report with codec and resolution breakdowns
- Optionally moves files into a codec/resolution directory hierarchy
"""

__version__ = "0.1.0"
