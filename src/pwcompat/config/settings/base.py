"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar, Self


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses declare their fields as dataclass fields and set ``_prefix``;
    each field is then read from ``<PREFIX>_<FIELD>`` by the env loaders.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation and coercion."""

    @classmethod
    def from_env(cls, env_file: str | None = None) -> Self:
        """Build from the environment, reading *env_file* first when given."""
        from pwcompat.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader

        loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        return loader.load(cls)


__all__ = ["Settings"]
