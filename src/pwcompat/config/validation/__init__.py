"""Config validation errors."""
from pwcompat.config.validation.errors import ConfigError, InvalidSettingValueError

__all__ = ["ConfigError", "InvalidSettingValueError"]
