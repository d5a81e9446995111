"""Config validation errors."""
from __future__ import annotations

from collections.abc import Iterable

from pwcompat.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Configuration could not be loaded or is invalid."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable, e.g. an unknown algorithm tag.

    ``allowed`` lists the accepted values when the setting is an enumeration.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        allowed: Iterable[str] = (),
    ) -> None:
        self.allowed: tuple[str, ...] = tuple(allowed)
        if self.allowed:
            reason = f"{reason} (allowed: {', '.join(self.allowed)})"
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "allowed": list(self.allowed)},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
