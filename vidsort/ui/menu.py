"""Interactive menu and single-shot commands."""

from dataclasses import replace
from enum import Enum
from pathlib import Path
from typing import Optional

from loguru import logger
from rich.markup import escape

from vidsort.classification.media_info import Prober
from vidsort.config.cli import CLIArgs, validate_source_directory
from vidsort.config.settings import ORGANIZATION_REPORT_FILENAME, SCAN_REPORT_FILENAME
from vidsort.exceptions import VidSortError
from vidsort.filesystem.discovery import count_videos
from vidsort.models.report import OrganizationReport, ScanReport
from vidsort.pipeline.organizer import organize_directory
from vidsort.pipeline.scanner import scan_directory
from vidsort.ui.console import console
from vidsort.ui.display import (
    display_move_outcome,
    display_organization_summary,
    display_scan_record,
    display_scan_summary,
    format_file_count,
)


class MenuAction(Enum):
    """Entries of the main menu."""
    SCAN = "1"
    ORGANIZE = "2"
    CHANGE_DIRECTORY = "3"
    EXIT = "4"


MENU_LABELS = {
    MenuAction.SCAN: "Scan files and create codec report",
    MenuAction.ORGANIZE: "Organize files by codec (move files)",
    MenuAction.CHANGE_DIRECTORY: "Change source directory",
    MenuAction.EXIT: "Exit",
}


def parse_menu_choice(response: str) -> Optional[MenuAction]:
    """
    Parse a menu selection.

    Args:
        response: Raw user input.

    Returns:
        The selected MenuAction, or None if the input is not a menu entry.
    """
    response = response.strip().lower()
    for action in MenuAction:
        if response == action.value:
            return action
    if response in ('q', 'quit', 'exit'):
        return MenuAction.EXIT
    return None


def display_menu(source_dir: Path) -> None:
    """Display the main menu."""
    console.rule("[bold cyan]VIDEO FILE ORGANIZER[/bold cyan]")
    console.print(f"Source Directory: [cyan]{escape(str(source_dir))}[/cyan]")
    console.print(f"Video files: {format_file_count(count_videos(source_dir))}\n")
    for action, label in MENU_LABELS.items():
        console.print(f"{action.value}. {label}")
    console.print("")


def run_scan(args: CLIArgs, prober: Prober) -> ScanReport:
    """Run a scan with the given arguments and show its results."""
    report_path = args.report_dir / SCAN_REPORT_FILENAME

    console.rule("[bold]SCANNING VIDEO FILES[/bold]")
    console.print_info(f"Source: {escape(str(args.source_dir))}\n")

    report = scan_directory(
        args.source_dir,
        prober=prober,
        report_path=report_path,
        on_record=None if args.quiet else display_scan_record,
        show_progress=args.quiet,
    )
    display_scan_summary(report, report_path)
    return report


def run_organize(args: CLIArgs, prober: Prober) -> OrganizationReport:
    """Ask for confirmation (unless --yes), then organize and show results."""
    report_path = args.report_dir / ORGANIZATION_REPORT_FILENAME

    console.rule("[bold]ORGANIZING FILES BY CODEC[/bold]")
    console.print_info(f"Source: {escape(str(args.source_dir))}")
    console.print_info(f"Output: {escape(str(args.output_dir))}\n")

    confirmed = args.assume_yes or console.confirm("This will move files. Continue?")

    report = organize_directory(
        args.source_dir,
        args.output_dir,
        confirmed=confirmed,
        prober=prober,
        report_path=report_path,
        on_outcome=None if args.quiet else display_move_outcome,
        show_progress=args.quiet,
    )
    display_organization_summary(report, report_path)
    return report


def change_source_directory(args: CLIArgs) -> CLIArgs:
    """
    Prompt for a new source directory.

    Returns:
        Updated arguments, or the same arguments if the new path is invalid.
    """
    new_dir = Path(console.ask("Enter new source directory path").strip()).expanduser()
    if not validate_source_directory(new_dir):
        console.print_error("Directory does not exist!")
        return args

    console.print_success(f"Source directory changed to: {new_dir}")
    return replace(args, source_dir=new_dir)


def run_menu(args: CLIArgs, prober: Prober) -> int:
    """
    Run the interactive menu until the user exits.

    Args:
        args: Initial arguments (source directory may be changed from the menu).
        prober: Probe backend shared by all runs.

    Returns:
        Exit code.
    """
    while True:
        display_menu(args.source_dir)
        choices = [action.value for action in MenuAction]
        action = parse_menu_choice(console.ask("Select an option", choices=choices))

        try:
            if action is MenuAction.SCAN:
                run_scan(args, prober)
            elif action is MenuAction.ORGANIZE:
                run_organize(args, prober)
            elif action is MenuAction.CHANGE_DIRECTORY:
                args = change_source_directory(args)
            elif action is MenuAction.EXIT:
                console.print("\nGoodbye!")
                return 0
            else:
                console.print_error("Invalid option. Please try again.")
        except VidSortError as e:
            logger.error(str(e))
            console.print_error(str(e))
        except KeyboardInterrupt:
            console.print_warning("Interrupted, partial report written.")
