"""Selection of the content items that need a legacy redirect page."""

from __future__ import annotations

from datetime import UTC, datetime, tzinfo
from typing import TYPE_CHECKING

from linkkeeper.data_primitives.document import ContentKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from linkkeeper.data_primitives.document import ContentItem


def _as_aware(value: datetime, tz: tzinfo) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=tz)


def is_legacy_item(item: ContentItem, cutoff: datetime, tz: tzinfo = UTC) -> bool:
    """Return True for normal posts created on or before ``cutoff``.

    Naive datetimes, on either side, are read in ``tz``.
    """
    return item.kind == ContentKind.POST and _as_aware(item.date, tz) <= _as_aware(cutoff, tz)


def select_legacy_items(
    corpus: Iterable[ContentItem],
    cutoff: datetime,
    tz: tzinfo = UTC,
) -> Iterator[ContentItem]:
    """Lazily yield the posts published under the old URL scheme.

    Corpus order is preserved. Items are expected to be well formed; the
    corpus loader is responsible for that.

    Args:
        corpus: Every content item of the build.
        cutoff: Last instant of the old URL scheme (inclusive).
        tz: Timezone naive item dates and a naive cutoff are interpreted in.

    """
    return (item for item in corpus if is_legacy_item(item, cutoff, tz))
