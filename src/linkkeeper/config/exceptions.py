"""Custom exceptions for configuration handling."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from linkkeeper.exceptions import LinkkeeperError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class ConfigError(LinkkeeperError):
    """Base exception for all configuration-related errors."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration file fails validation."""

    def __init__(self, path: Path, errors: Sequence[dict[str, Any]] | None = None) -> None:
        self.path = path
        self.errors = list(errors or [])
        details = "; ".join(
            f"{' -> '.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
            for error in self.errors
        )
        message = f"Configuration validation failed for {path} with {len(self.errors)} error(s)"
        super().__init__(f"{message}: {details}" if details else f"{message}.")


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse config at '{path}': {reason}")

