"""Content items read from the corpus and the redirect pages derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from linkkeeper.constants import INDEX_FILENAME

if TYPE_CHECKING:
    from datetime import datetime
    from pathlib import Path


class ContentKind(str, Enum):
    """Kind labels a content item can carry (the ``layout`` front matter key)."""

    POST = "post"
    PAGE = "page"
    DRAFT = "draft"


@dataclass(frozen=True, slots=True)
class ContentItem:
    """One authored unit of content.

    Owned by the corpus loader. The redirect pipeline only reads ``id``,
    ``kind``, ``date``, ``category`` and ``slug``.

    Attributes:
        id: Unique identifier, also the canonical URL of the item.
        kind: Kind label, ``"post"`` for a normal published post.
        date: Creation timestamp.
        category: Category tag used as the first legacy path segment.
        slug: URL-safe short name.
        title: Human readable title, if the loader found one.
        source_path: File the item was parsed from, if any.

    """

    id: str
    kind: str
    date: datetime
    category: str
    slug: str
    title: str | None = None
    source_path: Path | None = None


@dataclass(frozen=True, slots=True)
class RedirectPage:
    """Synthetic page living at a legacy path and pointing at a content item."""

    legacy_path: str
    target_item_id: str
    output_filename: str = INDEX_FILENAME

    @property
    def output_path(self) -> str:
        """Path of the written file relative to the build output root."""
        return f"{self.legacy_path}/{self.output_filename}"

    @property
    def url(self) -> str:
        """Directory-style URL the page answers on."""
        return f"/{self.legacy_path}/"
