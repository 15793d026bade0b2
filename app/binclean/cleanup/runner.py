"""Scan-then-delete orchestration.

The scan always runs to completion before any deletion starts. Errors
that escape the per-directory and per-candidate containment are wrapped
in FatalError, and a failed scan never leads to partial deletions.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from binclean.cleanup.errors import FatalError
from binclean.cleanup.models import DeletionOutcome, DeletionReport, ScanReport
from binclean.cleanup.operator import ArtifactDeleter
from binclean.cleanup.scanner import TreeScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CleanupRun:
    """Combined result of a scan and the deletions that followed.

    Attributes:
        scan: Scan report with the candidate list.
        deletion: Deletion report, or None when there was nothing to delete.
    """

    scan: ScanReport
    deletion: DeletionReport | None = None

    @property
    def nothing_to_do(self) -> bool:
        """Check if the scan found no candidates."""
        return self.scan.is_empty


def scan_for_artifacts(root: str | Path = ".") -> ScanReport:
    """Scan a tree for artifact directories.

    Args:
        root: Directory to scan.

    Returns:
        ScanReport with all candidates.

    Raises:
        FatalError: If the scan fails in a way not contained per directory.
    """
    try:
        return TreeScanner(root).scan()
    except Exception as e:
        logger.debug("Scan of %s aborted", root, exc_info=True)
        msg = f"Scan of {root} aborted: {e}"
        raise FatalError(msg) from e


def delete_artifacts(
    candidates: list[str],
    dry_run: bool = False,
    on_outcome: Callable[[DeletionOutcome], None] | None = None,
) -> DeletionReport:
    """Delete scanned candidates.

    Args:
        candidates: Candidate directories from a completed scan.
        dry_run: If True, report what would be deleted without deleting.
        on_outcome: Optional callback invoked with each outcome as it happens.

    Returns:
        DeletionReport with one outcome per candidate.

    Raises:
        FatalError: If the deleter fails outside its per-candidate handling.
    """
    try:
        return ArtifactDeleter(dry_run=dry_run).delete(candidates, on_outcome=on_outcome)
    except Exception as e:
        logger.debug("Deletion batch aborted", exc_info=True)
        msg = f"Deletion aborted: {e}"
        raise FatalError(msg) from e


def run_cleanup(root: str | Path = ".", dry_run: bool = False) -> CleanupRun:
    """Scan a tree and delete every artifact directory found.

    The deleter is not invoked when the scan finds nothing.

    Args:
        root: Directory to scan.
        dry_run: If True, report what would be deleted without deleting.

    Returns:
        CleanupRun with the scan and deletion reports.

    Raises:
        FatalError: If the scan or the deletion batch fails unexpectedly.
    """
    scan = scan_for_artifacts(root)
    if scan.is_empty:
        return CleanupRun(scan=scan)

    return CleanupRun(scan=scan, deletion=delete_artifacts(scan.candidates, dry_run=dry_run))
