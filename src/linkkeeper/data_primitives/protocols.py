"""Protocols for the collaborators the redirect pipeline hands pages to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from linkkeeper.data_primitives.document import RedirectPage


class LayoutRenderer(Protocol):
    """Resolves a named layout to rendered output."""

    def layout_data(self, layout_name: str) -> dict[str, Any]:
        """Return the front matter declared by the layout."""
        ...

    def render(self, layout_name: str, context: dict[str, Any]) -> str:
        """Render the layout with ``context``.

        Raises:
            LayoutNotFoundError: If no layout with that name exists.

        """
        ...


class PageWriter(Protocol):
    """Persists rendered pages under the build output root."""

    def write(self, page: RedirectPage, rendered: str) -> Path:
        """Write ``rendered`` for ``page`` and return the written path."""
        ...
