"""User interface components."""

from vidsort.ui.console import ConsoleUI, console
from vidsort.ui.display import (
    format_file_count,
    display_scan_record,
    display_move_outcome,
    display_breakdown,
    display_summary,
    display_scan_summary,
    build_output_tree,
    display_organization_summary,
    display_probe_install_hints,
)
from vidsort.ui.menu import (
    MenuAction,
    parse_menu_choice,
    display_menu,
    run_scan,
    run_organize,
    change_source_directory,
    run_menu,
)

__all__ = [
    "ConsoleUI",
    "console",
    "format_file_count",
    "display_scan_record",
    "display_move_outcome",
    "display_breakdown",
    "display_summary",
    "display_scan_summary",
    "build_output_tree",
    "display_organization_summary",
    "display_probe_install_hints",
    "MenuAction",
    "parse_menu_choice",
    "display_menu",
    "run_scan",
    "run_organize",
    "change_source_directory",
    "run_menu",
]
