"""Configuration management for stringify-interval."""

from .settings import (
    ConfigurationError,
    Settings,
    UnitLabels,
    UnitSettings,
    get_default_config_file,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "Settings",
    "UnitLabels",
    "UnitSettings",
    "get_default_config_file",
    "load_settings",
]
