"""Deletion operator for artifact directories.

Removes each scanned candidate recursively, with failures isolated per
candidate and dry-run support.
"""

import logging
import shutil
import stat
from collections.abc import Callable
from pathlib import Path

from binclean.cleanup.errors import DeletionError
from binclean.cleanup.models import DeletionOutcome, DeletionReport, OutcomeStatus

logger = logging.getLogger(__name__)

NOT_FOUND = "not found"
NOT_A_DIRECTORY = "not a directory"
INTERRUPTED = "interrupted"
NOT_ATTEMPTED = "not attempted: run interrupted"


class ArtifactDeleter:
    """Deletes candidate directories found by the tree scanner.

    Attributes:
        _dry_run: If True, report what would be deleted without deleting.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the ArtifactDeleter.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    @property
    def dry_run(self) -> bool:
        """Whether deletions are simulated."""
        return self._dry_run

    def delete(
        self,
        paths: list[str],
        on_outcome: Callable[[DeletionOutcome], None] | None = None,
    ) -> DeletionReport:
        """Delete every candidate and return one outcome per path.

        Candidates are processed in the given order. A failure on one
        candidate never prevents the next one from being attempted.

        If the batch is interrupted (Ctrl+C), no further candidate is
        started. The candidate in progress and all remaining ones are
        recorded as failed and the report is marked as interrupted.
        Deletions that already completed are not rolled back.

        Args:
            paths: Candidate directories, usually ``ScanReport.candidates``.
            on_outcome: Optional callback invoked with each outcome as soon
                as it is known, for live progress output.

        Returns:
            DeletionReport with exactly ``len(paths)`` outcomes.
        """
        report = DeletionReport()

        for index, path in enumerate(paths):
            try:
                outcome = self._delete_single(path)
            except KeyboardInterrupt:
                logger.warning("Interrupted while deleting %s", path)
                report.interrupted = True
                pending = [
                    DeletionOutcome(path=path, status=OutcomeStatus.FAILED, error=INTERRUPTED),
                    *(
                        DeletionOutcome(path=rest, status=OutcomeStatus.FAILED, error=NOT_ATTEMPTED)
                        for rest in paths[index + 1 :]
                    ),
                ]
                for skipped in pending:
                    self._record(report, skipped, on_outcome)
                break

            self._record(report, outcome, on_outcome)

        return report

    def _delete_single(self, path: str) -> DeletionOutcome:
        """Delete a single candidate directory.

        The candidate is re-validated first because the tree may have
        changed since it was scanned.

        Args:
            path: Candidate directory to remove.

        Returns:
            DeletionOutcome indicating success or failure.
        """
        try:
            mode = Path(path).lstat().st_mode
        except FileNotFoundError:
            return self._failure(DeletionError(path, NOT_FOUND))
        except OSError as e:
            return self._failure(DeletionError(path, e.strerror or str(e)))

        # Symlinks and files that replaced the directory are left alone
        if not stat.S_ISDIR(mode):
            return self._failure(DeletionError(path, NOT_A_DIRECTORY))

        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return DeletionOutcome(path=path, status=OutcomeStatus.WOULD_DELETE)

        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            return self._failure(DeletionError(path, NOT_FOUND))
        except OSError as e:
            return self._failure(DeletionError(path, str(e)))

        logger.info("Deleted %s", path)
        return DeletionOutcome(path=path, status=OutcomeStatus.DELETED)

    @staticmethod
    def _record(
        report: DeletionReport,
        outcome: DeletionOutcome,
        on_outcome: Callable[[DeletionOutcome], None] | None,
    ) -> None:
        report.outcomes.append(outcome)
        if on_outcome is None:
            return
        # A broken progress callback must not cost the remaining candidates
        try:
            on_outcome(outcome)
        except Exception as e:
            logger.warning("Could not report outcome for %r: %s", outcome.path, e)

    @staticmethod
    def _failure(error: DeletionError) -> DeletionOutcome:
        """Log a deletion error and turn it into a failed outcome."""
        logger.debug("%s", error)
        return DeletionOutcome(path=error.path, status=OutcomeStatus.FAILED, error=error.reason)
