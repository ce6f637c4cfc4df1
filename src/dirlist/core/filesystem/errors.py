"""Errors raised while accessing paths during a listing."""

from __future__ import annotations


class PathAccessError(Exception):
    """A path could not be inspected or opened.

    Raised for metadata lookup and directory enumeration failures. The
    listing engine recovers from it locally: the path is skipped and the
    error reported, everything else is still listed.
    """

    def __init__(self, path: str, cause: OSError, operation: str = "stat") -> None:
        """Initialize PathAccessError.

        Args:
            path: Path that could not be accessed
            cause: Underlying operating system error
            operation: Failed operation, ``"stat"`` or ``"scandir"``
        """
        self.path: str = path
        self.cause: OSError = cause
        self.operation: str = operation
        super().__init__(f"{path}: {self.reason}")

    @property
    def reason(self) -> str:
        """Operating system description of the failure."""
        return self.cause.strerror or str(self.cause)
