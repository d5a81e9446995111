"""Config settings – 12-factor env-based configuration."""
from pwcompat.config.settings.base import Settings
from pwcompat.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
