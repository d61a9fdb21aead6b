"""Config validation errors."""
from filteroption.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
)

__all__ = ["ConfigError", "InvalidSettingValueError"]
