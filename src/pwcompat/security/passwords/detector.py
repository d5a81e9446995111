"""Security – hash record format detection."""
from __future__ import annotations

import re

from pwcompat.kernel.errors import InvalidHashFormatError
from pwcompat.observability.logging import get_logger
from pwcompat.security.passwords.algorithm import HashAlgorithm
from pwcompat.security.passwords.bcrypt_adapter import BcryptAdapter

__all__ = ["determine_hash_algorithm"]

_log = get_logger(__name__)

_MD5_RE = re.compile(r"[a-f0-9]{32}")
_MD5_SALT_RE = re.compile(r"[a-f0-9]{32}:.+", re.DOTALL)


def determine_hash_algorithm(hashed: str) -> HashAlgorithm:
    """Classify a stored record by its shape.

    Rules are tried in order: bare MD5 hex, salted MD5, bcrypt. Anything
    else raises :class:`InvalidHashFormatError`; this is the only place
    that decides which scheme produced a record.
    """
    if _MD5_RE.fullmatch(hashed):
        return HashAlgorithm.MD5
    if _MD5_SALT_RE.fullmatch(hashed):
        return HashAlgorithm.MD5_SALT
    if BcryptAdapter.matches(hashed):
        return HashAlgorithm.BCRYPT
    _log.warning("password.invalid_hash_format", length=len(hashed))
    raise InvalidHashFormatError(hashed)
