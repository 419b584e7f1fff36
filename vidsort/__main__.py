"""Entry point for the vidsort package.

Run with: python -m vidsort [scan|organize|menu]
"""

import sys
from typing import List, Optional

from loguru import logger

from vidsort.classification import create_prober, ensure_probe_available
from vidsort.config import (
    LOG_FILENAME,
    CLIArgs,
    args_to_cli_args,
    parse_arguments,
    validate_source_directory,
)
from vidsort.exceptions import ProbeUnavailableError, VidSortError
from vidsort.ui import (
    ConsoleUI,
    console,
    display_probe_install_hints,
    run_menu,
    run_organize,
    run_scan,
)


def setup_logging(debug: bool = False, quiet: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging on the console.
        quiet: If True, only warnings and errors reach the console.
    """
    logger.remove()
    if debug:
        level = "DEBUG"
    elif quiet:
        level = "WARNING"
    else:
        level = "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILENAME,
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
    )


def display_configuration(cli_args: CLIArgs, console: ConsoleUI) -> None:
    """
    Display the current configuration to the user.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.
    """
    console.print_panel(
        f"[bold]Configuration[/bold]\n"
        f"Source: [cyan]{cli_args.source_dir}[/cyan]\n"
        f"Output: [cyan]{cli_args.output_dir}[/cyan]\n"
        f"Reports: [cyan]{cli_args.report_dir}[/cyan]\n"
        f"Probe: [cyan]{cli_args.backend}[/cyan]",
        title="Video File Organizer",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the video sorting tool.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(argv)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug, cli_args.quiet)

    prober = create_prober(cli_args.backend, cli_args.ffprobe, cli_args.timeout)
    try:
        ensure_probe_available(prober)
    except ProbeUnavailableError as e:
        logger.error(str(e))
        display_probe_install_hints(prober.name)
        console.print_error("Cannot proceed without a probing tool. Exiting.")
        return 1
    console.print_success(f"{prober.name} is available")

    if not validate_source_directory(cli_args.source_dir):
        console.print_error(f"Source directory {cli_args.source_dir} is not usable")
        return 1

    display_configuration(cli_args, console)

    try:
        if cli_args.is_interactive:
            return run_menu(cli_args, prober)
        if cli_args.mode == "scan":
            run_scan(cli_args, prober)
        else:
            run_organize(cli_args, prober)
    except VidSortError as e:
        logger.error(str(e))
        console.print_error(str(e))
        return 1
    except KeyboardInterrupt:
        console.print_warning("Interrupted.")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
