"""Exceptions raised while resolving and rendering layouts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linkkeeper.exceptions import LinkkeeperError

if TYPE_CHECKING:
    from pathlib import Path


class RenderingError(LinkkeeperError):
    """Base class for rendering errors."""


class LayoutNotFoundError(RenderingError):
    """Raised when a named layout does not exist in the layouts directory."""

    def __init__(self, layout_name: str, layouts_dir: Path) -> None:
        self.layout_name = layout_name
        self.layouts_dir = layouts_dir
        super().__init__(f"Layout '{layout_name}' not found in {layouts_dir}")


class LayoutRenderError(RenderingError):
    """Raised when a layout cannot be parsed or rendered."""

    def __init__(self, layout_name: str, reason: str) -> None:
        self.layout_name = layout_name
        self.reason = reason
        super().__init__(f"Failed to render layout '{layout_name}': {reason}")
