"""The site's list of generated pages, read by later build phases."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from linkkeeper.data_primitives.document import RedirectPage

logger = logging.getLogger(__name__)


class PageRegistry:
    """Ordered collection of pages produced during a build.

    Duplicate URLs point at a corpus defect (two posts sharing category, date
    and slug); they are logged and kept, the later write wins on disk.
    """

    def __init__(self) -> None:
        self._pages: list[RedirectPage] = []
        self._urls: set[str] = set()

    def add(self, page: RedirectPage) -> None:
        if page.url in self._urls:
            logger.warning("Duplicate page URL %s (target %s)", page.url, page.target_item_id)
        self._urls.add(page.url)
        self._pages.append(page)

    def extend(self, pages: Iterable[RedirectPage]) -> None:
        for page in pages:
            self.add(page)

    def urls(self) -> list[str]:
        return [page.url for page in self._pages]

    def __iter__(self) -> Iterator[RedirectPage]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)
