"""Config settings – 12-factor env-based configuration."""
from filteroption.config.settings.base import Settings
from filteroption.config.settings.filter import DEFAULT_PAGE_SIZE, FilterSettings
from filteroption.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["DEFAULT_PAGE_SIZE", "EnvSettingsLoader", "FilterSettings", "Settings", "SettingsLoader"]
