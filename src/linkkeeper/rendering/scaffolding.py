"""One-time site initialization: default redirect layout and config."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from linkkeeper.config.settings import LinkkeeperConfig, load_linkkeeper_config
from linkkeeper.constants import LAYOUT_EXTENSION

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def scaffold_site(site_root: Path, *, force: bool = False) -> tuple[LinkkeeperConfig, Path, bool]:
    """Install the default redirect layout and make sure a config file exists.

    Args:
        site_root: Root directory of the site.
        force: Overwrite an existing layout of the same name.

    Returns:
        The site configuration, the layout path and whether the layout was written.

    """
    site_root = site_root.expanduser().resolve()
    site_root.mkdir(parents=True, exist_ok=True)

    config = load_linkkeeper_config(site_root)

    layout_name = f"{config.redirects.layout}{LAYOUT_EXTENSION}"
    layout_path = site_root / config.paths.layouts_dir / layout_name
    if layout_path.exists() and not force:
        logger.info("Layout already exists at %s, leaving it untouched", layout_path)
        return config, layout_path, False

    layout_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(TEMPLATES_DIR / f"redirect{LAYOUT_EXTENSION}", layout_path)
    logger.info("Wrote redirect layout to %s", layout_path)
    return config, layout_path, True
