"""Configuration settings for the stringify-interval command line tool.

Settings come from, in order of priority: environment variables prefixed
with STRINGIFY_INTERVAL_, a JSON configuration file, and defaults. They are
validated with Pydantic and turned into the library's DisplayConfig and
Text structures.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import StringifyError
from ..models.display import DisplayConfig, DisplaySettings, Text
from ..models.threshold_map import ThresholdMap
from ..models.units import CALENDAR_UNITS, UnitKind, unit_from_name


class ConfigurationError(StringifyError):
    """Exception raised for configuration loading and validation errors."""

    pass


class UnitSettings(BaseModel):
    """Display settings for one unit as written in a configuration file."""

    lower: int = Field(default=0, ge=0)
    upper: Optional[int] = Field(default=None, ge=0)
    pad: int = Field(default=0, ge=0)
    display_zero: bool = False

    @model_validator(mode="after")
    def validate_bounds(self) -> "UnitSettings":
        """Ensure the range is not inverted."""
        if self.upper is not None and self.upper < self.lower:
            raise ValueError(
                f"upper ({self.upper}) must not be below lower ({self.lower})"
            )
        return self

    def to_display_settings(self) -> DisplaySettings:
        return DisplaySettings.new(self.lower, self.upper, self.pad, self.display_zero)


class UnitLabels(BaseModel):
    """Labels for one unit: a baseline and labels from given counts upwards.

    Example: {"default": "days", "thresholds": {"1": "day", "2": "days"}}
    """

    default: str
    thresholds: Dict[int, str] = Field(default_factory=dict)

    @field_validator("thresholds")
    @classmethod
    def validate_thresholds(cls, v: Dict[int, str]) -> Dict[int, str]:
        """Thresholds are counts, so they cannot be negative."""
        negative = [threshold for threshold in v if threshold < 0]
        if negative:
            raise ValueError(f"Label thresholds must be non-negative: {negative}")
        return v

    def to_threshold_map(self) -> ThresholdMap[str]:
        labels = ThresholdMap.from_iter(self.default, sorted(self.thresholds.items()))
        if labels is None:
            raise ConfigurationError("Label thresholds are not strictly increasing")
        return labels


def _validate_unit_names(v: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not isinstance(v, dict):
        return v
    return {unit_from_name(name).name.lower(): value for name, value in v.items()}


class Settings(BaseSettings):
    """Application settings with validation."""

    # Logging settings
    log_level: str = Field(default="WARNING")
    log_file: Optional[Path] = Field(default=None)
    json_logs: bool = Field(default=False)

    # Text settings
    joiner: str = Field(default=", ")
    final_joiner: Optional[str] = Field(default=" and ")
    spacer: str = Field(default=" ")
    labels: Optional[Dict[str, UnitLabels]] = Field(default=None)

    # Unit settings
    calendar_units: bool = Field(default=True)
    seconds_upper: Optional[int] = Field(default=600, ge=0)
    units: Optional[Dict[str, UnitSettings]] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="STRINGIFY_INTERVAL_",
        case_sensitive=False,
        env_ignore_empty=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is supported."""
        valid_levels = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator("units", "labels", mode="before")
    @classmethod
    def validate_unit_names(
        cls, v: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        """Normalize unit names, rejecting unknown ones."""
        return _validate_unit_names(v)

    @model_validator(mode="after")
    def validate_calendar_units(self) -> "Settings":
        """Years and months cannot be configured while calendar units are off."""
        if self.units and not self.calendar_units:
            calendar_names = {unit.name.lower() for unit in CALENDAR_UNITS}
            configured = sorted(calendar_names & set(self.units))
            if configured:
                raise ValueError(
                    f"Units {configured} require calendar_units to be enabled"
                )
        return self

    def build_display_config(self) -> DisplayConfig:
        """Create the display configuration described by these settings.

        seconds_upper only applies when no per-unit settings are given.
        """
        if self.units is None:
            if self.calendar_units:
                config = DisplayConfig.default()
            else:
                config = DisplayConfig.default_without_calendar()
            # Without an upper bound seconds are shown for any interval
            return config.with_unit(
                UnitKind.SECONDS, DisplaySettings.new(0, self.seconds_upper)
            )

        config = DisplayConfig.none()
        for name, unit_settings in self.units.items():
            config = config.with_unit(
                unit_from_name(name), unit_settings.to_display_settings()
            )
        return config

    def build_text(self) -> Text:
        """Create the output text described by these settings."""
        text = Text.default().with_separators(
            joiner=self.joiner,
            final_joiner=self.final_joiner,
            spacer=self.spacer,
            drop_final_joiner=self.final_joiner is None,
        )
        if self.labels:
            text = text.with_labels(
                **{
                    name: unit_labels.to_threshold_map()
                    for name, unit_labels in self.labels.items()
                }
            )
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary for serialization."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def load_config(cls, config_file: Optional[Path] = None) -> "Settings":
        """Load configuration from file and environment variables.

        Priority order:
        1. Environment variables (handled automatically by BaseSettings)
        2. Config file
        3. Default values

        Raises:
            ConfigurationError: If the file exists but is not a JSON object
        """
        init_kwargs: Dict[str, Any] = {}

        if config_file and config_file.exists():
            try:
                with open(config_file, "r") as f:
                    file_config = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Invalid JSON in configuration file: {e}",
                    {"config_file": config_file},
                ) from e
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    "Configuration file must contain a JSON object",
                    {"config_file": config_file},
                )
            init_kwargs.update(file_config)
            logging.debug(f"Loaded configuration from {config_file}")

        # Environment variables take priority over the file
        env_names = {key.upper() for key, value in os.environ.items() if value}
        for name in cls.model_fields:
            env_name = f"STRINGIFY_INTERVAL_{name.upper()}"
            if env_name in env_names:
                init_kwargs.pop(name, None)

        return cls(**init_kwargs)


def get_default_config_file() -> Path:
    """Get the default configuration file path."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home) / "stringify-interval" / "config.json"

    return Path.home() / ".config" / "stringify-interval" / "config.json"


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Load settings from a configuration file and the environment.

    Args:
        config_file: Optional path to configuration file.
                    If None, uses default location.

    Raises:
        ConfigurationError: If the configuration file cannot be parsed
    """
    if config_file is None:
        config_file = get_default_config_file()

    return Settings.load_config(config_file)

