"""Error taxonomy for workspace operations.

Every failure raised by the scanner and the file helpers is a subclass of
``WorkspaceError`` so callers can branch on the kind of failure.  The tool
layer turns them into plain message strings for MCP clients.
"""

from __future__ import annotations


class WorkspaceError(Exception):
    """Base class for all workspace operation failures."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(message)
        self.path = path


class PathNotFound(WorkspaceError):
    """The workspace root does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Workspace path does not exist: {path}")


class NotADirectory(WorkspaceError):
    """The workspace root exists but is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Workspace path is not a directory: {path}")


class _IOFailure(WorkspaceError):
    action = "access"

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(path, f"Failed to {self.action} {path}: {cause}")
        self.cause = cause


class ListingFailed(_IOFailure):
    """A directory could not be listed, or one of its entries classified.

    Raised for any such failure anywhere in the tree; the scan is aborted and
    no partial result is returned.
    """

    action = "list"


class ReadFailed(_IOFailure):
    """A file could not be read or decoded as text."""

    action = "read"


class WriteFailed(_IOFailure):
    """A file could not be written."""

    action = "write"
