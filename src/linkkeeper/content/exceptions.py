"""Exceptions raised while loading the content corpus."""

from __future__ import annotations

from linkkeeper.exceptions import LinkkeeperError


class ContentLoadError(LinkkeeperError):
    """Raised when a content file lacks data the build needs."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load content from '{path}': {reason}")


class ContentParseError(ContentLoadError):
    """Raised when a content file's front matter cannot be parsed."""
