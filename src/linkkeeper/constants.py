"""Build-time constants shared by the redirect pipeline."""

from __future__ import annotations

from datetime import datetime
from typing import Final

# Posts created on or before this instant were published under the old
# ``category/YYYY/MM/DD/slug`` scheme.
DEFAULT_CUTOFF: Final[datetime] = datetime(2017, 8, 1)

LEGACY_DATE_FORMAT: Final[str] = "%Y/%m/%d"

# Served by web servers when a directory URL is requested.
INDEX_FILENAME: Final[str] = "index.html"

REDIRECT_LAYOUT: Final[str] = "redirect"
LAYOUT_EXTENSION: Final[str] = ".html"

CONFIG_DIR: Final[str] = ".linkkeeper"
CONFIG_FILENAME: Final[str] = "linkkeeper.toml"
ENV_PREFIX: Final[str] = "LINKKEEPER_"
