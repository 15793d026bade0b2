"""Breadth-first scanner for build artifact directories.

Walks a directory tree from a root, collecting every directory whose
basename is exactly ``bin`` or ``obj``. Matched directories are pruned:
their contents are never inspected because they are removed wholesale.
"""

import logging
import re
import stat
from collections import deque
from pathlib import Path

from binclean.cleanup.errors import ListingError
from binclean.cleanup.models import DirectoryEntry, DirectoryListing, EntryKind, ScanReport

logger = logging.getLogger(__name__)

# Directory basenames treated as build output (case-sensitive)
ARTIFACT_DIR_NAMES: frozenset[str] = frozenset({"bin", "obj"})

_SEPARATORS = re.compile(r"[\\/]")


def basename(path: str) -> str:
    """Return the final component of a path.

    Both ``/`` and ``\\`` count as separators so Windows-style paths match
    on any platform. A path without separators is its own basename.

    Args:
        path: Path string.

    Returns:
        Segment after the last separator.
    """
    return _SEPARATORS.split(path)[-1]


def is_artifact_dir(path: str) -> bool:
    """Check if a path names a build artifact directory.

    Exact match on the basename only, so ``binary``, ``cabinet`` or
    ``obj2`` never match.

    Args:
        path: Path of a directory.

    Returns:
        True if the basename is exactly ``bin`` or ``obj``.
    """
    return basename(path) in ARTIFACT_DIR_NAMES


class TreeScanner:
    """Collects artifact directories under a root, breadth-first.

    Symbolic links are never followed, so a link pointing at a directory
    is neither matched nor traversed and link cycles cannot occur.

    Args:
        root: Directory to start from. Defaults to the current directory.
    """

    def __init__(self, root: str | Path = ".") -> None:
        self._root = str(root)

    @property
    def root(self) -> str:
        """Root path the scan starts from."""
        return self._root

    def scan(self) -> ScanReport:
        """Scan the tree and return all matched directories.

        The root itself is never a candidate, only its descendants.
        Directories that cannot be listed are recorded in
        ``ScanReport.skipped`` and their subtree is left out.

        Returns:
            ScanReport with candidates in breadth-first discovery order.
        """
        report = ScanReport(root=self._root)
        frontier: deque[str] = deque([self._root])

        while frontier:
            current = frontier.popleft()
            listing = self.list_directory(current)

            if listing.error is not None:
                logger.debug("Skipping %s: %s", current, listing.error.reason)
                report.skipped.append(listing.error)
                continue

            report.visited += 1
            for entry in listing.entries:
                if not entry.is_directory:
                    continue
                if is_artifact_dir(entry.path):
                    logger.debug("Matched %s", entry.path)
                    report.candidates.append(entry.path)
                else:
                    frontier.append(entry.path)

        logger.debug(
            "Scanned %d directories under %s, %d candidate(s), %d skipped",
            report.visited,
            self._root,
            len(report.candidates),
            len(report.skipped),
        )
        return report

    def list_directory(self, path: str) -> DirectoryListing:
        """List and classify the direct children of a directory.

        Either every child is classified or the whole listing fails;
        a failure never yields a partial set of entries.

        Args:
            path: Directory to list.

        Returns:
            DirectoryListing with sorted entries, or with an error set.
        """
        try:
            children = sorted(Path(path).iterdir())
            entries = tuple(
                DirectoryEntry(path=str(child), kind=self._get_entry_kind(child))
                for child in children
            )
        except OSError as e:
            return DirectoryListing(path=path, error=ListingError(path, e.strerror or str(e)))

        return DirectoryListing(path=path, entries=entries)

    @staticmethod
    def _get_entry_kind(path: Path) -> EntryKind:
        """Classify a path without following symlinks.

        Args:
            path: Path to classify.

        Returns:
            EntryKind for the path.

        Raises:
            OSError: If the path cannot be stat'ed.
        """
        mode = path.lstat().st_mode

        if stat.S_ISLNK(mode):
            return EntryKind.SYMLINK
        if stat.S_ISDIR(mode):
            return EntryKind.DIRECTORY
        if stat.S_ISREG(mode):
            return EntryKind.FILE

        return EntryKind.OTHER
