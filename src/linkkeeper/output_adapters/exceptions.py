"""Custom exceptions for output adapters."""

from linkkeeper.exceptions import LinkkeeperError


class OutputAdapterError(LinkkeeperError):
    """Base class for output adapter errors."""


class PageWriteError(OutputAdapterError):
    """Raised when a rendered page cannot be written to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write page to '{path}': {reason}")
