"""Security – MD5 and salted-MD5 record codec."""
from __future__ import annotations

import hashlib
import random

from pwcompat.security.passwords.salt import DEFAULT_SALT_LENGTH, salt

__all__ = ["extract_salt", "gen_mix_salt", "md5_hex", "mix_salt"]

_SEPARATOR = ":"


def md5_hex(text: str) -> str:
    """32-char lowercase hex MD5 of *text* (UTF-8)."""
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def mix_salt(salt_value: str, password: str) -> str:
    """Build a ``md5salt`` record: ``md5(salt + password):salt``.

    The separator is always present, so an empty salt yields ``"<hex>:"``.
    """
    return f"{md5_hex(salt_value + password)}{_SEPARATOR}{salt_value}"


def gen_mix_salt(password: str, *, rng: random.Random | None = None) -> str:
    """Hash *password* under a freshly generated 5-char salt."""
    return mix_salt(salt(DEFAULT_SALT_LENGTH, rng=rng), password)


def extract_salt(hashed: str) -> str:
    """Return the text after the first ``:`` of *hashed*, or ``""``.

    Lenient on purpose: any string is accepted, nothing is raised.
    """
    _, separator, tail = hashed.partition(_SEPARATOR)
    return tail if separator else ""
