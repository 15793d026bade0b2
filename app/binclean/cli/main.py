"""Main CLI application entry point.

Defines the Typer application: a single command that scans a tree for
bin/ and obj/ directories and deletes them.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler
from rich.markup import escape

from binclean import __version__
from binclean.cleanup.errors import FatalError
from binclean.cleanup.runner import delete_artifacts, scan_for_artifacts
from binclean.cli.display import (
    display_path,
    display_text,
    print_candidates,
    print_outcome,
    print_skipped,
    print_summary,
    run_to_dict,
)
from binclean.utils.formatting import err_console, print_fatal, print_info, print_success

# Exit code for a run cancelled with Ctrl+C (128 + SIGINT)
EXIT_INTERRUPTED = 130

app = typer.Typer(
    name="binclean",
    help="Delete bin/ and obj/ build output directories.",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


class OutputFormat(str, Enum):
    """Output format options for the cleanup report."""

    TEXT = "text"
    JSON = "json"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"binclean version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route binclean log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level, otherwise WARNING.
    """
    pkg_logger = logging.getLogger("binclean")
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)

    pkg_logger.addHandler(RichHandler(console=err_console, show_time=False, show_path=False))
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.command()
def clean(
    root: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=False,
            dir_okay=True,
            help="Directory to clean. Defaults to the current directory.",
        ),
    ] = Path("."),
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Recursively delete every [bold]bin[/bold] and [bold]obj[/bold] directory under ROOT."""
    configure_logging(verbose)
    as_json = output_format == OutputFormat.JSON

    if not as_json:
        print_info(f"Scanning {escape(display_path(str(root)))} for bin/ and obj/ directories...")

    try:
        scan = scan_for_artifacts(root)
    except FatalError as e:
        print_fatal(escape(display_text(str(e))))
        raise typer.Exit(code=1) from e
    except KeyboardInterrupt:
        err_console.print("[warning]Scan interrupted. Nothing was deleted.[/]")
        raise typer.Exit(code=EXIT_INTERRUPTED) from None

    if verbose and not as_json:
        print_skipped(scan)

    if scan.is_empty:
        if as_json:
            typer.echo(json.dumps(run_to_dict(scan, None), indent=2))
        else:
            print_success("No bin/ or obj/ directories found. Nothing to do.")
        return

    if not as_json:
        print_candidates(scan.candidates)
        if dry_run:
            print_info("\nDry run: nothing will be deleted.")
        else:
            print_info("\nDeleting...")

    try:
        report = delete_artifacts(
            scan.candidates,
            dry_run=dry_run,
            on_outcome=None if as_json else print_outcome,
        )
    except FatalError as e:
        print_fatal(escape(display_text(str(e))))
        raise typer.Exit(code=1) from e

    if as_json:
        typer.echo(json.dumps(run_to_dict(scan, report), indent=2))
    else:
        print_summary(report, dry_run=dry_run)

    if report.interrupted:
        raise typer.Exit(code=EXIT_INTERRUPTED)


if __name__ == "__main__":
    app()
