"""Cleanup domain models for scanning and deleting artifact directories.

This module defines the data structures passed between the tree scanner,
the deleter and the CLI: directory entries and listings, the scan report,
and per-candidate deletion outcomes.
"""

from dataclasses import dataclass, field
from enum import Enum

from binclean.cleanup.errors import ListingError


class EntryKind(str, Enum):
    """Type of a directory entry as seen by ``lstat``.

    Attributes:
        DIRECTORY: Real directory (not a symlink to one).
        FILE: Regular file.
        SYMLINK: Symbolic link, regardless of what it points to.
        OTHER: Sockets, FIFOs, device nodes and similar.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


class OutcomeStatus(str, Enum):
    """Result of attempting to delete one candidate.

    Attributes:
        DELETED: Directory and its contents were removed.
        FAILED: Removal was attempted (or skipped) and did not succeed.
        WOULD_DELETE: Dry run; the directory would have been removed.
    """

    DELETED = "deleted"
    FAILED = "failed"
    WOULD_DELETE = "would_delete"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """A single child read while listing a directory.

    Attributes:
        path: Path of the child (root-relative or absolute, like the root).
        kind: Entry type.
    """

    path: str
    kind: EntryKind

    @property
    def is_directory(self) -> bool:
        """Check if this entry is a real directory."""
        return self.kind == EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class DirectoryListing:
    """Result of listing one directory: either entries or an error.

    Attributes:
        path: Directory that was listed.
        entries: Children in sorted order; empty when listing failed.
        error: ListingError if listing failed, None otherwise.
    """

    path: str
    entries: tuple[DirectoryEntry, ...] = ()
    error: ListingError | None = None

    def __post_init__(self) -> None:
        """Ensure a failed listing carries no entries."""
        if self.error is not None and self.entries:
            msg = "A failed listing cannot carry entries"
            raise ValueError(msg)

    @property
    def ok(self) -> bool:
        """Check if the directory was listed successfully."""
        return self.error is None


@dataclass(slots=True)
class ScanReport:
    """Outcome of a full tree scan.

    Attributes:
        root: Root path the scan started from.
        candidates: Matched directories in breadth-first discovery order.
        skipped: Listing errors for branches that were abandoned.
        visited: Number of directories whose children were inspected.
    """

    root: str
    candidates: list[str] = field(default_factory=list)
    skipped: list[ListingError] = field(default_factory=list)
    visited: int = 0

    @property
    def is_empty(self) -> bool:
        """Check if the scan found nothing to delete."""
        return not self.candidates


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of a single candidate deletion.

    Attributes:
        path: Candidate directory that was operated on.
        status: Deleted, failed, or would-delete (dry run).
        error: Error description if the deletion failed, None otherwise.
    """

    path: str
    status: OutcomeStatus
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Check if the candidate was (or would have been) removed."""
        return self.status != OutcomeStatus.FAILED

    @property
    def failed(self) -> bool:
        """Check if the candidate could not be removed."""
        return self.status == OutcomeStatus.FAILED


@dataclass(slots=True)
class DeletionReport:
    """All outcomes of one deletion batch.

    Attributes:
        outcomes: One outcome per candidate, in candidate order.
        interrupted: True if the batch was cancelled before finishing.
    """

    outcomes: list[DeletionOutcome] = field(default_factory=list)
    interrupted: bool = False

    @property
    def deleted_count(self) -> int:
        """Number of candidates removed (or that would be, in a dry run)."""
        return sum(1 for o in self.outcomes if o.succeeded)

    @property
    def failed_count(self) -> int:
        """Number of candidates that could not be removed."""
        return sum(1 for o in self.outcomes if o.failed)
