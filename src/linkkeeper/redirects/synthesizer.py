"""Builds redirect pages for legacy content items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from linkkeeper.constants import INDEX_FILENAME, LEGACY_DATE_FORMAT
from linkkeeper.data_primitives.document import RedirectPage

if TYPE_CHECKING:
    from collections.abc import Mapping

    from linkkeeper.data_primitives.document import ContentItem


def legacy_path(item: ContentItem) -> str:
    """Return the pre-migration path ``category/YYYY/MM/DD/slug`` of ``item``.

    The date is the item's own calendar date, in whatever timezone the
    timestamp carries. A post dated 2016-03-02 in category ``c++`` with
    slug ``foo`` maps to ``c++/2016/03/02/foo``.
    """
    return f"{item.category}/{item.date.strftime(LEGACY_DATE_FORMAT)}/{item.slug}"


def synthesize(item: ContentItem) -> RedirectPage:
    """Create the redirect page for ``item``. Pure and deterministic."""
    return RedirectPage(
        legacy_path=legacy_path(item),
        target_item_id=item.id,
        output_filename=INDEX_FILENAME,
    )


def build_context(
    page: RedirectPage,
    layout_data: Mapping[str, Any] | None = None,
    site: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Assemble the render context for ``page``.

    Layout front matter becomes the base of ``page``; ``source_url`` and
    ``url`` always win over it.
    """
    page_data = dict(layout_data or {})
    page_data["source_url"] = page.target_item_id
    page_data["url"] = page.url
    return {"page": page_data, "site": dict(site or {})}
