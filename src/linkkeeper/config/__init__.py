"""Configuration package for linkkeeper."""

from linkkeeper.config.exceptions import (
    ConfigError,
    ConfigParseError,
    ConfigValidationError,
)
from linkkeeper.config.settings import (
    LinkkeeperConfig,
    PathsSettings,
    RedirectSettings,
    SiteSettings,
    create_default_config,
    find_linkkeeper_config,
    load_linkkeeper_config,
    save_linkkeeper_config,
)

__all__ = [
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "LinkkeeperConfig",
    "PathsSettings",
    "RedirectSettings",
    "SiteSettings",
    "create_default_config",
    "find_linkkeeper_config",
    "load_linkkeeper_config",
    "save_linkkeeper_config",
]
