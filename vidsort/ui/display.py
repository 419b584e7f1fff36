"""Display functions for scan and organize output."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from rich.markup import escape
from rich.tree import Tree

from vidsort.config.settings import PROBE_INSTALL_HINTS
from vidsort.models.report import (
    MoveOutcome,
    MoveStatus,
    OrganizationReport,
    ScanRecord,
    ScanReport,
)
from vidsort.ui.console import console


def format_file_count(count: int) -> str:
    """
    Format file count with proper pluralization.

    Args:
        count: Number of files.

    Returns:
        Formatted string like "5 files" or "1 file".
    """
    return f"{count} file{'s' if count != 1 else ''}"


def display_scan_record(record: ScanRecord) -> None:
    """Print the result of scanning one file."""
    console.print(f"[cyan]Scanning: {escape(record.video.filename)}[/cyan]")
    if record.is_valid:
        console.print(
            f"[green]  ✓ Codec: {escape(record.probe.codec)} | "
            f"Resolution: {record.resolution_label}[/green]"
        )
    else:
        console.print("[red]  ✗ Failed to get video info[/red]")


def display_move_outcome(outcome: MoveOutcome) -> None:
    """Print what happened to one file during organization."""
    console.print(f"\n[yellow]Processing: {escape(outcome.filename)}[/yellow]")

    if outcome.status is MoveStatus.FAILED_PROBE:
        console.print("[red]  ✗ Failed to get video info - skipping[/red]")
        return

    console.print(f"  Codec: {escape(outcome.codec)}")
    console.print(f"  Resolution: {outcome.resolution_label}")
    if outcome.status is MoveStatus.MOVED:
        console.print(f"  Target: {escape(str(outcome.destination.parent))}")
        console.print("[green]  ✓ Moved successfully[/green]")
    else:
        console.print(f"[red]  ✗ Failed to move: {escape(outcome.reason or '')}[/red]")


def display_breakdown(title: str, items: List[Tuple[str, int]], label: str) -> None:
    """
    Display a count table.

    Args:
        title: Table title.
        items: (key, count) pairs in display order.
        label: Header of the key column.
    """
    if not items:
        return
    table = console.create_table(title, [label, "Files"])
    for key, count in items:
        table.add_row(key, str(count))
    console.print_table(table)


def display_summary(
    title: str,
    total: int,
    successful: int,
    failed: int,
    success_label: str = "Successfully processed"
) -> None:
    """
    Display final run counts.

    Args:
        title: Rule title.
        total: Files found.
        successful: Files handled successfully.
        failed: Files that failed.
        success_label: Label of the success line.
    """
    console.rule(f"[bold green]{title}[/bold green]")
    console.print(f"[blue]Total files:[/blue] {total}")
    console.print(f"[green]{success_label}:[/green] {successful}")
    if failed > 0:
        console.print(f"[red]Failed:[/red] {failed}")
    else:
        console.print(f"Failed: {failed}")


def display_scan_summary(report: ScanReport, report_path: Optional[Path] = None) -> None:
    """Display the summary of a scan run."""
    title = "SCAN INTERRUPTED" if report.interrupted else "SCAN COMPLETE"
    display_summary(title, report.total, report.success, report.failed)
    if report_path:
        console.print_success(f"Report saved to: {report_path}")
    display_breakdown("Codec Breakdown", report.statistics.sorted_codecs(), "Codec")
    display_breakdown(
        "Resolution Breakdown", report.statistics.sorted_resolutions(), "Resolution"
    )


def build_output_tree(output_dir: Path, files_by_codec: Dict[str, List[str]]) -> Tree:
    """
    Build a Rich tree of the organized output.

    Args:
        output_dir: Root of the organized tree.
        files_by_codec: Codec to moved file entries.

    Returns:
        Rich Tree with one node per codec.
    """
    root_tree = Tree(f"📁 [bold cyan]{escape(str(output_dir))}[/bold cyan]")
    for codec in sorted(files_by_codec):
        entries = files_by_codec[codec]
        codec_node = root_tree.add(
            f"📁 [bold]{escape(codec)}[/bold] [dim]({format_file_count(len(entries))})[/dim]"
        )
        for entry in entries:
            codec_node.add(f"🎬 [dim]{escape(entry)}[/dim]")
    return root_tree


def display_organization_summary(
    report: OrganizationReport,
    report_path: Optional[Path] = None
) -> None:
    """Display the summary of an organize run."""
    if not report.confirmed:
        console.print_warning("Operation cancelled.")
        return

    title = "ORGANIZATION INTERRUPTED" if report.interrupted else "ORGANIZATION COMPLETE"
    display_summary(
        title, report.total, report.processed, report.failed,
        success_label="Successfully moved",
    )
    if report_path:
        console.print_success(f"Complete report saved to: {report_path}")

    files_by_codec = report.files_by_codec
    if files_by_codec:
        console.print("\nFiles organized by codec:")
        console.print(build_output_tree(report.output_dir, files_by_codec))


def display_probe_install_hints(tool: str) -> None:
    """Explain how to install the missing probing tool."""
    lines = [f"[bold]{tool}[/bold] is required but was not found.", ""]
    if tool == "mediainfo":
        lines.append("Install the MediaInfo library (libmediainfo) for your system.")
    else:
        lines.append("Install ffmpeg (it includes ffprobe):")
        for system, command in PROBE_INSTALL_HINTS.items():
            lines.append(f"  {system}: [cyan]{command}[/cyan]")
    console.print_panel("\n".join(lines), title="Missing tool", border_style="red")
