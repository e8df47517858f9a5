"""Centralized configuration for linkkeeper.

- Pydantic models for ``.linkkeeper/linkkeeper.toml``
- Loading and saving functions

Priority (highest to lowest): environment variables
(``LINKKEEPER_SECTION__KEY``), the config file, defaults.
"""

from __future__ import annotations

import logging
import os
import tomllib
from copy import deepcopy
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tomli_w
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linkkeeper.config.exceptions import ConfigParseError, ConfigValidationError
from linkkeeper.constants import CONFIG_DIR, CONFIG_FILENAME, DEFAULT_CUTOFF, ENV_PREFIX, REDIRECT_LAYOUT

logger = logging.getLogger(__name__)


class RedirectSettings(BaseModel):
    """Legacy URL redirect generation."""

    enabled: bool = Field(
        default=False,
        description="Generate redirect pages for posts published under the old URL scheme",
    )
    cutoff: datetime = Field(
        default=DEFAULT_CUTOFF,
        description="Posts created on or before this instant get a redirect page",
    )
    layout: str = Field(
        default=REDIRECT_LAYOUT,
        min_length=1,
        description="Name of the layout used to render redirect pages",
    )


class PathsSettings(BaseModel):
    """Site directory paths, relative to the site root."""

    posts_dir: str = Field(default="_posts", description="Directory holding the post sources")
    layouts_dir: str = Field(default="_layouts", description="Directory holding the layouts")
    output_dir: str = Field(default="_site", description="Build output root")

    @field_validator("posts_dir", "layouts_dir", "output_dir", mode="after")
    @classmethod
    def validate_safe_path(cls, v: str) -> str:
        """Validate path is relative and does not contain traversal sequences."""
        path = Path(v)
        if path.is_absolute():
            msg = f"Path must be relative, not absolute: {v}"
            raise ValueError(msg)
        if any(part == ".." for part in path.parts):
            msg = f"Path must not contain traversal sequences ('..'): {v}"
            raise ValueError(msg)
        return v


class SiteSettings(BaseModel):
    """Site-wide values exposed to layouts and used to build canonical URLs."""

    title: str = Field(default="", description="Site title, available to layouts as site.title")
    base_url: str = Field(default="", description="Absolute site URL without trailing slash")
    permalink: str = Field(
        default="/{slug}/",
        description="Canonical URL pattern; fields: category, year, month, day, slug",
    )
    timezone: str = Field(default="UTC", description="Timezone for naive dates")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            msg = f"Invalid timezone '{v}': {e}"
            raise ValueError(msg) from e
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


class LinkkeeperConfig(BaseSettings):
    """Root configuration, the schema of ``.linkkeeper/linkkeeper.toml``.

    Supports environment variable overrides with the pattern
    ``LINKKEEPER_SECTION__KEY`` (e.g. ``LINKKEEPER_REDIRECTS__ENABLED=true``).
    """

    redirects: RedirectSettings = Field(default_factory=RedirectSettings)
    paths: PathsSettings = Field(default_factory=PathsSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)

    model_config = SettingsConfigDict(
        extra="forbid",
        validate_assignment=True,
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
    )

    @property
    def cutoff(self) -> datetime:
        """Redirect cutoff as an aware datetime; naive values use ``site.timezone``."""
        cutoff = self.redirects.cutoff
        if cutoff.tzinfo is None:
            return cutoff.replace(tzinfo=self.site.tzinfo)
        return cutoff

    def site_payload(self) -> dict[str, Any]:
        """Values exposed to layouts under ``site``."""
        return {
            "title": self.site.title,
            "url": self.site.base_url,
            "time": datetime.now(UTC),
        }


# ============================================================================
# Configuration Loading and Saving
# ============================================================================


def find_linkkeeper_config(start_dir: Path) -> Path | None:
    """Search upward for ``.linkkeeper/linkkeeper.toml``.

    Args:
        start_dir: Starting directory for upward search

    Returns:
        Path to the config file if found, else None

    """
    current = start_dir.expanduser().resolve()
    for candidate in (current, *current.parents):
        config_path = candidate / CONFIG_DIR / CONFIG_FILENAME
        if config_path.exists():
            return config_path
    return None


def _collect_env_override_paths() -> set[tuple[str, ...]]:
    """Return the set of config paths defined via environment variables."""
    env_paths: set[tuple[str, ...]] = set()
    for key in os.environ:
        if not key.startswith(ENV_PREFIX):
            continue
        parts = [part.lower() for part in key[len(ENV_PREFIX) :].split("__") if part]
        if parts:
            env_paths.add(tuple(parts))
    return env_paths


def _merge_config(
    base: dict[str, Any],
    override: dict[str, Any],
    env_override_paths: set[tuple[str, ...]],
    current_path: tuple[str, ...] = (),
) -> dict[str, Any]:
    """Merge override into base, skipping keys provided via env vars."""
    merged = deepcopy(base)

    for key, value in override.items():
        path = (*current_path, str(key).lower())
        if path in env_override_paths:
            continue

        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_config(merged[key], value, env_override_paths, path)
        else:
            merged[key] = value

    return merged


def load_linkkeeper_config(site_root: Path | None = None, *, create_missing: bool = True) -> LinkkeeperConfig:
    """Load configuration from ``.linkkeeper/linkkeeper.toml``.

    Args:
        site_root: Root directory of the site. If None, uses current working directory.
        create_missing: Write a default config file when none exists. When False the
            defaults are returned and nothing is written.

    Returns:
        Validated LinkkeeperConfig instance

    Raises:
        ConfigParseError: If the file is not valid TOML
        ConfigValidationError: If the file contains invalid values

    """
    if site_root is None:
        site_root = Path.cwd()

    config_path = find_linkkeeper_config(site_root) or site_root / CONFIG_DIR / CONFIG_FILENAME

    if not config_path.exists():
        if not create_missing:
            logger.info("No configuration found at %s, using defaults", config_path)
            return LinkkeeperConfig()
        logger.info("No configuration found, creating default config at %s", config_path)
        return create_default_config(site_root)

    logger.info("Loading config from %s", config_path)

    try:
        file_data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    try:
        base_dict = LinkkeeperConfig().model_dump(mode="json")
        merged = _merge_config(base_dict, file_data, _collect_env_override_paths())
        return LinkkeeperConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigValidationError(config_path, e.errors()) from e


def create_default_config(site_root: Path) -> LinkkeeperConfig:
    """Create default ``.linkkeeper/linkkeeper.toml`` and return it."""
    config = LinkkeeperConfig()
    save_linkkeeper_config(config, site_root)
    logger.info("Created default config at %s", site_root / CONFIG_DIR / CONFIG_FILENAME)
    return config


def save_linkkeeper_config(config: LinkkeeperConfig, site_root: Path) -> Path:
    """Save the configuration to ``.linkkeeper/linkkeeper.toml``.

    Args:
        config: LinkkeeperConfig instance to save
        site_root: Root directory of the site

    Returns:
        Path to the saved config file

    """
    config_dir = site_root / CONFIG_DIR
    config_dir.mkdir(exist_ok=True, parents=True)

    config_path = config_dir / CONFIG_FILENAME
    data = config.model_dump(exclude_defaults=False, mode="json")
    config_path.write_text(tomli_w.dumps(data), encoding="utf-8")
    logger.debug("Saved config to %s", config_path)

    return config_path
