"""Security – bcrypt adapter with embedded-cost introspection."""
from __future__ import annotations

import re

import bcrypt

from pwcompat.kernel.errors import InvalidHashFormatError

__all__ = ["MAX_COST", "MIN_COST", "BcryptAdapter"]

MIN_COST = 4
MAX_COST = 31

# bcrypt only ever reads the first 72 bytes; PHP's password_hash truncates
# silently, newer bcrypt releases raise instead.
_MAX_PASSWORD_BYTES = 72

# Cost is restricted to 04..31 and every class is ASCII-only, so anything
# this accepts is also accepted by bcrypt.checkpw.
_BCRYPT_RE = re.compile(
    r"\$(?P<ident>2[aby])\$(?P<cost>0[4-9]|[12][0-9]|3[01])\$(?P<payload>[./A-Za-z0-9]{53})",
    re.ASCII,
)


class BcryptAdapter:
    """Thin wrapper over :mod:`bcrypt` working with ``str`` records.

    Records use the modular-crypt layout ``$<ident>$<cost>$<salt+digest>``;
    ``$2a$``, ``$2b$`` and ``$2y$`` (PHP) identifiers are accepted on input,
    ``$2b$`` is produced on output.
    """

    def __init__(self, prefix: bytes = b"2b") -> None:
        self._prefix = prefix

    @staticmethod
    def matches(hashed: str) -> bool:
        return _BCRYPT_RE.fullmatch(hashed) is not None

    def hash(self, password: str, cost: int) -> str:
        if not MIN_COST <= cost <= MAX_COST:
            raise ValueError(f"bcrypt cost must be between {MIN_COST} and {MAX_COST}, got {cost}")
        salt = bcrypt.gensalt(rounds=cost, prefix=self._prefix)
        return bcrypt.hashpw(_encode(password), salt).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        """Constant-time check delegated to :func:`bcrypt.checkpw`.

        Raises :class:`InvalidHashFormatError` when *hashed* is not a
        bcrypt record bcrypt itself can read.
        """
        if not self.matches(hashed):
            raise InvalidHashFormatError(hashed)
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("ascii"))
        except ValueError as exc:
            raise InvalidHashFormatError(hashed, cause=exc) from exc

    def get_cost(self, hashed: str) -> int:
        """Return the cost factor recorded in *hashed*'s header."""
        match = _BCRYPT_RE.fullmatch(hashed)
        if match is None:
            raise InvalidHashFormatError(hashed)
        return int(match.group("cost"))


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]
