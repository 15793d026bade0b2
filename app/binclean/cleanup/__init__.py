"""Build artifact cleanup module.

This module provides the breadth-first tree scanner, the deletion
operator, and the scan-then-delete orchestration.
"""

from binclean.cleanup.errors import CleanupError, DeletionError, FatalError, ListingError
from binclean.cleanup.models import (
    DeletionOutcome,
    DeletionReport,
    DirectoryEntry,
    DirectoryListing,
    EntryKind,
    OutcomeStatus,
    ScanReport,
)
from binclean.cleanup.operator import ArtifactDeleter
from binclean.cleanup.runner import CleanupRun, delete_artifacts, run_cleanup, scan_for_artifacts
from binclean.cleanup.scanner import ARTIFACT_DIR_NAMES, TreeScanner, basename, is_artifact_dir

__all__ = [
    "ARTIFACT_DIR_NAMES",
    "ArtifactDeleter",
    "CleanupError",
    "CleanupRun",
    "DeletionError",
    "DeletionOutcome",
    "DeletionReport",
    "DirectoryEntry",
    "DirectoryListing",
    "EntryKind",
    "FatalError",
    "ListingError",
    "OutcomeStatus",
    "ScanReport",
    "TreeScanner",
    "basename",
    "delete_artifacts",
    "is_artifact_dir",
    "run_cleanup",
    "scan_for_artifacts",
]
