"""Security – PasswordSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from pwcompat.config.settings import Settings
from pwcompat.config.validation import InvalidSettingValueError
from pwcompat.security.passwords.algorithm import HashAlgorithm
from pwcompat.security.passwords.bcrypt_adapter import MAX_COST, MIN_COST


@dataclasses.dataclass
class PasswordSettings(Settings):
    """Algorithm used for new hashes and the bcrypt cost factor.

    Loaded from ``PASSWORD_ENCRYPTION_ALGORITHM`` / ``PASSWORD_COST`` by
    :class:`~pwcompat.config.settings.EnvSettingsLoader`. ``cost`` is only
    consulted for ``bcrypt``.
    """

    _prefix: ClassVar[str] = "PASSWORD"

    encryption_algorithm: HashAlgorithm = HashAlgorithm.BCRYPT
    cost: int = 12

    def _validate(self) -> None:
        try:
            self.encryption_algorithm = HashAlgorithm(self.encryption_algorithm)
        except ValueError:
            raise InvalidSettingValueError(
                "encryption_algorithm",
                self.encryption_algorithm,
                "unknown hash algorithm",
                allowed=[a.value for a in HashAlgorithm],
            ) from None
        if isinstance(self.cost, bool) or not isinstance(self.cost, int):
            raise InvalidSettingValueError("cost", self.cost, "must be an integer")
        if not MIN_COST <= self.cost <= MAX_COST:
            raise InvalidSettingValueError(
                "cost", self.cost, f"must be between {MIN_COST} and {MAX_COST}"
            )


__all__ = ["PasswordSettings"]
