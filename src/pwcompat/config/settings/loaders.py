"""Config settings – environment and ``.env`` loaders."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from pwcompat.config.settings.base import Settings
from pwcompat.config.validation import ConfigError

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Read each dataclass field from ``<PREFIX>_<FIELD>``.

    ``PasswordSettings`` (prefix ``PASSWORD``) reads
    ``PASSWORD_ENCRYPTION_ALGORITHM`` and ``PASSWORD_COST``. Unset variables
    keep the field default; values are only turned into ``int`` here, the
    settings class validates and coerces the rest.
    """

    def load(self, settings_class: type[T]) -> T:
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = self.env_key(settings_class, field.name)
            raw = os.environ.get(env_key)
            if raw is not None:
                values[field.name] = _parse(env_key, raw.strip(), field.type)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(
                f"Cannot build {settings_class.__name__} from environment", cause=exc
            ) from exc

    @staticmethod
    def env_key(settings_class: type[Settings], field_name: str) -> str:
        return f"{settings_class._prefix}_{field_name}".upper().lstrip("_")


class DotenvSettingsLoader(EnvSettingsLoader):
    """Load a ``.env`` file into the process environment, then read it.

    Variables already set in the environment win unless *override* is true.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[T]) -> T:
        try:
            from dotenv import load_dotenv  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'pwcompat[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return super().load(settings_class)


def _parse(env_key: str, value: str, type_hint: Any) -> Any:
    if type_hint not in (int, "int"):
        return value
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Setting '{env_key}' must be an integer, got {value!r}", cause=exc) from exc


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
