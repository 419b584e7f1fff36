"""Report artifact rendering and writing."""

from vidsort.reporting.text_report import (
    render_scan_report,
    render_organization_report,
    write_report,
)

__all__ = [
    "render_scan_report",
    "render_organization_report",
    "write_report",
]
