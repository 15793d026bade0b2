"""Rich display functions for scan and deletion results.

Provides the progress lines and summaries printed by the
binclean command, plus a JSON rendering of a complete run.
"""

import os
from typing import Any

from rich.markup import escape

from binclean.cleanup.models import DeletionOutcome, DeletionReport, OutcomeStatus, ScanReport
from binclean.utils.formatting import console, print_success, print_warning


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def display_path(path: str) -> str:
    """Return a printable form of a filesystem path.

    Names that are not valid UTF-8 come back from the OS with surrogate
    escapes, which cannot be encoded for output. Their raw bytes are shown
    as backslash escapes instead (``caf\\xe9``).

    Args:
        path: Path as returned by the filesystem.

    Returns:
        Path text that is always encodable as UTF-8.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def _markup_path(path: str) -> str:
    return escape(display_path(path))


def display_text(text: str) -> str:
    """Like display_path, for messages that may embed such a path."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def print_candidates(candidates: list[str]) -> None:
    """Print the number of matched directories followed by each path.

    Args:
        candidates: Matched directories in discovery order.
    """
    noun = _plural(len(candidates), "directory", "directories")
    console.print(f"Found [bold]{len(candidates)}[/bold] {noun} to delete:")
    for path in candidates:
        console.print(f"  [path]{_markup_path(path)}[/path]", soft_wrap=True)


def print_outcome(outcome: DeletionOutcome) -> None:
    """Print a single per-candidate result line.

    Args:
        outcome: Result of deleting one candidate.
    """
    path = _markup_path(outcome.path)
    if outcome.status == OutcomeStatus.DELETED:
        console.print(f"[success]deleted[/success]  {path}", soft_wrap=True)
    elif outcome.status == OutcomeStatus.WOULD_DELETE:
        console.print(f"[info]would delete[/info]  {path}", soft_wrap=True)
    else:
        reason = escape(display_text(outcome.error or "Unknown error"))
        console.print(f"[error]failed[/error]  {path} [muted]({reason})[/muted]", soft_wrap=True)


def print_skipped(scan: ScanReport) -> None:
    """Print a warning for each directory that could not be listed.

    Args:
        scan: Completed scan report.
    """
    for error in scan.skipped:
        print_warning(
            f"Could not scan {_markup_path(error.path)} ({escape(display_text(error.reason))})"
        )


def print_summary(report: DeletionReport, dry_run: bool = False) -> None:
    """Print the final completion line for a deletion batch.

    Args:
        report: Deletion report.
        dry_run: Whether the batch was a dry run.
    """
    if report.interrupted:
        console.print(
            f"\n[warning]Interrupted.[/warning] [success]{report.deleted_count} deleted[/success], "
            f"[error]{report.failed_count} not deleted[/error]"
        )
        return

    if dry_run:
        count = report.deleted_count
        noun = _plural(count, "directory", "directories")
        print_success(f"\nDry run complete. {count} {noun} would be deleted.")
        return

    if report.failed_count == 0:
        count = report.deleted_count
        noun = _plural(count, "directory", "directories")
        print_success(f"\nDone. {count} {noun} deleted.")
    else:
        console.print(
            f"\nDone. [success]{report.deleted_count} deleted[/success], "
            f"[error]{report.failed_count} failed[/error]"
        )


def run_to_dict(scan: ScanReport, report: DeletionReport | None) -> dict[str, Any]:
    """Build a JSON-serializable view of a complete run.

    Args:
        scan: Completed scan report.
        report: Deletion report, or None if nothing was deleted.

    Returns:
        Dictionary with root, candidates, skipped branches and outcomes.
    """
    outcomes = report.outcomes if report is not None else []
    return {
        "root": display_path(scan.root),
        "candidates": [display_path(p) for p in scan.candidates],
        "skipped": [
            {"path": display_path(e.path), "reason": display_text(e.reason)} for e in scan.skipped
        ],
        "outcomes": [
            {
                "path": display_path(o.path),
                "status": o.status.value,
                "error": display_text(o.error) if o.error is not None else None,
            }
            for o in outcomes
        ],
        "interrupted": report.interrupted if report is not None else False,
    }
