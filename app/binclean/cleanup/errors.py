"""Error taxonomy for the cleanup pipeline.

Listing and deletion errors are contained at the smallest scope and
carried as values. Only ``FatalError`` is raised out of the pipeline.
"""


class CleanupError(Exception):
    """Base class for all cleanup errors."""


class ListingError(CleanupError):
    """Enumerating a directory's children failed.

    Attributes:
        path: Directory that could not be listed.
        reason: Underlying error description.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot list {path}: {reason}")


class DeletionError(CleanupError):
    """Recursively removing a candidate directory failed.

    Attributes:
        path: Candidate directory that could not be removed.
        reason: Underlying error description.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot delete {path}: {reason}")


class FatalError(CleanupError):
    """An unanticipated failure that aborts the whole run."""
