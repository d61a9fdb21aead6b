"""Config – 12-factor settings, loaders, and config errors."""

from filteroption.config.settings import EnvSettingsLoader, FilterSettings, Settings, SettingsLoader
from filteroption.config.validation import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "FilterSettings",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
