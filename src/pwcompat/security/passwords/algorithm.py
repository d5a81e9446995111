"""Security – HashAlgorithm enum."""
from __future__ import annotations

from enum import Enum


class HashAlgorithm(str, Enum):
    """Closed set of supported hash record schemes.

    Values double as configuration tags (``PASSWORD_ENCRYPTION_ALGORITHM``).
    """

    MD5 = "md5"
    MD5_SALT = "md5salt"
    BCRYPT = "bcrypt"


__all__ = ["HashAlgorithm"]
