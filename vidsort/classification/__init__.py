"""Video metadata probing and resolution classification."""

from vidsort.classification.resolution import (
    ResolutionBucket,
    RESOLUTION_LADDER,
    classify,
    resolution_label,
    directory_label,
)
from vidsort.classification.media_info import (
    Prober,
    FFProbeProber,
    MediaInfoProber,
    create_prober,
    ensure_probe_available,
    probe_file,
)

__all__ = [
    "ResolutionBucket",
    "RESOLUTION_LADDER",
    "classify",
    "resolution_label",
    "directory_label",
    "Prober",
    "FFProbeProber",
    "MediaInfoProber",
    "create_prober",
    "ensure_probe_available",
    "probe_file",
]
