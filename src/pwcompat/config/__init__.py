"""Config – 12-factor settings and loaders."""

from pwcompat.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from pwcompat.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
