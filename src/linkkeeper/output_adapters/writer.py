"""Writes rendered pages into the build output directory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from linkkeeper.output_adapters.exceptions import PageWriteError
from linkkeeper.utils.paths import safe_path_join

if TYPE_CHECKING:
    from pathlib import Path

    from linkkeeper.data_primitives.document import RedirectPage

logger = logging.getLogger(__name__)


class SiteWriter:
    """Serializes rendered pages to ``output_dir/<legacy_path>/<output_filename>``."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def destination(self, page: RedirectPage) -> Path:
        """Return the file ``page`` is written to.

        Raises:
            PathTraversalError: If the legacy path escapes ``output_dir``.

        """
        return safe_path_join(self.output_dir, page.legacy_path, page.output_filename)

    def write(self, page: RedirectPage, rendered: str) -> Path:
        """Write ``rendered`` for ``page``, creating directories as needed."""
        path = self.destination(page)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(rendered, encoding="utf-8")
        except OSError as e:
            raise PageWriteError(str(path), str(e)) from e
        logger.debug("Wrote %s", path)
        return path
