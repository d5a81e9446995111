"""Security – LegacyPasswordHasher: dispatch, verification, rehash advice."""
from __future__ import annotations

import hmac
import random
from typing import assert_never

from pwcompat.kernel.security import PasswordHasher
from pwcompat.observability.logging import get_logger
from pwcompat.security.passwords.algorithm import HashAlgorithm
from pwcompat.security.passwords.bcrypt_adapter import BcryptAdapter
from pwcompat.security.passwords.detector import determine_hash_algorithm
from pwcompat.security.passwords.digest import extract_salt, gen_mix_salt, md5_hex, mix_salt
from pwcompat.security.passwords.settings import PasswordSettings

__all__ = ["LegacyPasswordHasher"]

_log = get_logger(__name__)


class LegacyPasswordHasher(PasswordHasher):
    """Hash with the configured scheme, verify any supported scheme.

    The hasher keeps no state besides the injected settings, so one
    instance may be shared between threads. To change algorithm or cost,
    build a new hasher from new :class:`PasswordSettings`.

    Usage::

        hasher = LegacyPasswordHasher(PasswordSettings(cost=12))
        stored = hasher.hash("s3cret")
        hasher.verify("s3cret", stored)      # True
        hasher.needs_rehash(legacy_md5)      # True
    """

    def __init__(
        self,
        settings: PasswordSettings | None = None,
        *,
        bcrypt_adapter: BcryptAdapter | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or PasswordSettings()
        self._bcrypt = bcrypt_adapter or BcryptAdapter()
        self._rng = rng

    @property
    def settings(self) -> PasswordSettings:
        return self._settings

    def determine_hash_algorithm(self, hashed: str) -> HashAlgorithm:
        return determine_hash_algorithm(hashed)

    def hash(self, password: str) -> str:
        algorithm = self._settings.encryption_algorithm
        match algorithm:
            case HashAlgorithm.MD5:
                hashed = md5_hex(password)
            case HashAlgorithm.MD5_SALT:
                hashed = gen_mix_salt(password, rng=self._rng)
            case HashAlgorithm.BCRYPT:
                hashed = self._bcrypt.hash(password, self._settings.cost)
            case _:
                assert_never(algorithm)
        _log.debug("password.hashed", algorithm=algorithm.value)
        return hashed

    def verify(self, password: str, hashed: str) -> bool:
        """Check *password* against a stored record of any supported scheme.

        A wrong password is an ordinary ``False``; only an unrecognisable
        record raises :class:`~pwcompat.kernel.errors.InvalidHashFormatError`.
        """
        algorithm = determine_hash_algorithm(hashed)
        match algorithm:
            case HashAlgorithm.MD5:
                ok = _equals(md5_hex(password), hashed)
            case HashAlgorithm.MD5_SALT:
                ok = _equals(mix_salt(extract_salt(hashed), password), hashed)
            case HashAlgorithm.BCRYPT:
                ok = self._bcrypt.verify(password, hashed)
            case _:
                assert_never(algorithm)
        _log.debug("password.verified", algorithm=algorithm.value, ok=ok)
        return ok

    def needs_rehash(self, hashed: str) -> bool:
        """True when *hashed* was not produced under the current settings.

        Raises :class:`~pwcompat.kernel.errors.InvalidHashFormatError` for an
        unrecognisable record.
        """
        algorithm = determine_hash_algorithm(hashed)
        configured = self._settings.encryption_algorithm
        if algorithm != configured:
            result = True
        else:
            match algorithm:
                case HashAlgorithm.BCRYPT:
                    result = self._bcrypt.get_cost(hashed) != self._settings.cost
                case HashAlgorithm.MD5 | HashAlgorithm.MD5_SALT:
                    result = False
                case _:
                    assert_never(algorithm)
        _log.debug(
            "password.rehash_checked",
            algorithm=algorithm.value,
            configured=configured.value,
            needs_rehash=result,
        )
        return result

    def verify_and_upgrade(self, password: str, hashed: str) -> tuple[bool, str | None]:
        """Verify, then return a replacement record when an upgrade is due.

        Returns ``(False, None)`` for a wrong password, ``(True, None)`` when
        *hashed* is current, and ``(True, new_hash)`` otherwise. Storing
        ``new_hash`` is the caller's job.
        """
        if not self.verify(password, hashed):
            return False, None
        if self.needs_rehash(hashed):
            return True, self.hash(password)
        return True, None


def _equals(expected: str, actual: str) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), actual.encode("utf-8"))
