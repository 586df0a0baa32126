"""Settings loading (YAML file + environment)."""

from .loader import (
    DEFAULT_CONFIG_PATH,
    ServerConfig,
    ServiceAccountConfig,
    Settings,
    SourceConfig,
    load_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ServerConfig",
    "ServiceAccountConfig",
    "Settings",
    "SourceConfig",
    "load_settings",
]
