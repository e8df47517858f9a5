"""Loads Jekyll-style posts (``YYYY-MM-DD-slug.md`` with YAML front matter).

Front matter keys:

- ``layout``: content kind, ``post`` when absent
- ``date``: creation timestamp, the file name date when absent
- ``category``: category tag (the first entry if a list), else the first entry of ``categories``
- ``slug``: URL name, the file name slug when absent
- ``title``: informational

Naive timestamps are interpreted in ``site.timezone``.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml

from linkkeeper.content.exceptions import ContentLoadError, ContentParseError
from linkkeeper.data_primitives.document import ContentItem, ContentKind

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path
    from zoneinfo import ZoneInfo

    from linkkeeper.config.settings import SiteSettings

logger = logging.getLogger(__name__)

POST_FILENAME_PATTERN = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<slug>.+)$")
CONTENT_SUFFIXES = frozenset({".md", ".markdown", ".html"})


def _coerce_datetime(value: Any, tz: ZoneInfo) -> datetime | None:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=tz)


def _category(metadata: Mapping[str, Any]) -> str | None:
    for key in ("category", "categories"):
        value = metadata.get(key)
        if isinstance(value, str):
            value = value.split() if key == "categories" else [value]
        if isinstance(value, (list, tuple)):
            value = next((str(entry) for entry in value if entry), None)
        if value:
            return str(value)
    return None


def canonical_id(site: SiteSettings, category: str, created: datetime, slug: str) -> str:
    """Return the post's URL under the current permalink scheme."""
    try:
        return site.permalink.format(
            category=category,
            year=f"{created.year:04d}",
            month=f"{created.month:02d}",
            day=f"{created.day:02d}",
            slug=slug,
        )
    except (KeyError, IndexError) as e:
        msg = f"Unknown field {e} in site.permalink pattern '{site.permalink}'"
        raise ValueError(msg) from e


def parse_content_file(path: Path, site: SiteSettings) -> ContentItem:
    """Parse one content file into a ContentItem.

    Raises:
        ContentParseError: If the front matter is not valid YAML.
        ContentLoadError: If the date or category cannot be determined.

    """
    try:
        post = frontmatter.loads(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ContentParseError(str(path), str(e)) from e

    metadata = post.metadata
    name_match = POST_FILENAME_PATTERN.match(path.stem)

    raw_date = metadata.get("date") or (name_match.group("date") if name_match else None)
    created = _coerce_datetime(raw_date, site.tzinfo)
    if created is None:
        raise ContentLoadError(str(path), f"no usable date (got {raw_date!r})")

    category = _category(metadata)
    if category is None:
        raise ContentLoadError(str(path), "missing 'category' front matter")

    slug = str(metadata.get("slug") or (name_match.group("slug") if name_match else path.stem))
    try:
        item_id = str(metadata.get("id") or canonical_id(site, category, created, slug))
    except ValueError as e:
        raise ContentLoadError(str(path), str(e)) from e

    return ContentItem(
        id=item_id,
        kind=str(metadata.get("layout", ContentKind.POST.value)),
        date=created,
        category=category,
        slug=slug,
        title=metadata.get("title"),
        source_path=path,
    )


def load_corpus(posts_dir: Path, site: SiteSettings) -> list[ContentItem]:
    """Load every content file under ``posts_dir``, sorted by relative path.

    A missing directory yields an empty corpus.
    """
    if not posts_dir.exists():
        logger.warning("Posts directory %s does not exist, corpus is empty", posts_dir)
        return []

    files = sorted(
        (p for p in posts_dir.rglob("*") if p.is_file() and p.suffix in CONTENT_SUFFIXES),
        key=lambda p: p.relative_to(posts_dir).as_posix(),
    )
    items = [parse_content_file(path, site) for path in files]
    logger.info("Loaded %d content item(s) from %s", len(items), posts_dir)
    return items
