"""Tests for cleanup domain models."""

import pytest
from binclean.cleanup.errors import DeletionError, FatalError, ListingError
from binclean.cleanup.models import (
    DeletionOutcome,
    DeletionReport,
    DirectoryEntry,
    DirectoryListing,
    EntryKind,
    OutcomeStatus,
    ScanReport,
)


class TestEnums:
    """Tests for enum string values."""

    def test_entry_kind_values(self) -> None:
        assert EntryKind.DIRECTORY.value == "directory"
        assert EntryKind.FILE.value == "file"
        assert EntryKind.SYMLINK.value == "symlink"
        assert EntryKind.OTHER.value == "other"

    def test_outcome_status_values(self) -> None:
        assert OutcomeStatus.DELETED.value == "deleted"
        assert OutcomeStatus.FAILED.value == "failed"
        assert OutcomeStatus.WOULD_DELETE.value == "would_delete"


class TestDirectoryListing:
    """Tests for DirectoryListing."""

    def test_successful_listing(self) -> None:
        entry = DirectoryEntry(path="src/bin", kind=EntryKind.DIRECTORY)
        listing = DirectoryListing(path="src", entries=(entry,))

        assert listing.ok is True
        assert entry.is_directory is True

    def test_failed_listing(self) -> None:
        listing = DirectoryListing(path="src", error=ListingError("src", "Permission denied"))

        assert listing.ok is False
        assert listing.entries == ()

    def test_failed_listing_rejects_entries(self) -> None:
        """A listing cannot carry both an error and entries."""
        entry = DirectoryEntry(path="src/bin", kind=EntryKind.DIRECTORY)
        with pytest.raises(ValueError, match="cannot carry entries"):
            DirectoryListing(path="src", entries=(entry,), error=ListingError("src", "boom"))

    def test_symlink_is_not_a_directory(self) -> None:
        assert DirectoryEntry(path="bin", kind=EntryKind.SYMLINK).is_directory is False


class TestReports:
    """Tests for ScanReport and DeletionReport."""

    def test_scan_report_defaults(self) -> None:
        report = ScanReport(root=".")

        assert report.candidates == []
        assert report.skipped == []
        assert report.visited == 0
        assert report.is_empty is True

    def test_deletion_report_counts(self) -> None:
        report = DeletionReport(
            outcomes=[
                DeletionOutcome(path="a/bin", status=OutcomeStatus.DELETED),
                DeletionOutcome(path="b/bin", status=OutcomeStatus.FAILED, error="not found"),
                DeletionOutcome(path="c/obj", status=OutcomeStatus.WOULD_DELETE),
            ]
        )

        assert report.deleted_count == 2
        assert report.failed_count == 1
        assert report.outcomes[1].failed is True
        assert report.outcomes[2].succeeded is True


class TestErrors:
    """Tests for the cleanup error taxonomy."""

    def test_listing_error_message(self) -> None:
        error = ListingError("/proj/locked", "Permission denied")

        assert error.path == "/proj/locked"
        assert error.reason == "Permission denied"
        assert str(error) == "Cannot list /proj/locked: Permission denied"

    def test_deletion_error_message(self) -> None:
        error = DeletionError("/proj/bin", "not found")

        assert str(error) == "Cannot delete /proj/bin: not found"

    def test_fatal_error_is_distinct(self) -> None:
        assert not issubclass(FatalError, (ListingError, DeletionError))
