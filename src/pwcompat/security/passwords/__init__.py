"""Security – Password hashing across legacy and current schemes.

Three record shapes are understood:

* ``md5``     – bare 32-char lowercase hex digest
* ``md5salt`` – ``<md5(salt + password)>:<salt>``
* ``bcrypt``  – ``$2b$<cost>$<salt+digest>`` modular-crypt string

New hashes are produced with whatever :class:`PasswordSettings` selects;
every shape can still be verified, and :meth:`LegacyPasswordHasher.needs_rehash`
tells the caller when a stored record should be replaced.
"""
from pwcompat.security.passwords.algorithm import HashAlgorithm
from pwcompat.security.passwords.bcrypt_adapter import BcryptAdapter
from pwcompat.security.passwords.detector import determine_hash_algorithm
from pwcompat.security.passwords.digest import extract_salt, gen_mix_salt, md5_hex, mix_salt
from pwcompat.security.passwords.hasher import LegacyPasswordHasher
from pwcompat.security.passwords.salt import SALT_ALPHABET, salt
from pwcompat.security.passwords.settings import PasswordSettings

__all__ = [
    "SALT_ALPHABET",
    "BcryptAdapter",
    "HashAlgorithm",
    "LegacyPasswordHasher",
    "PasswordSettings",
    "determine_hash_algorithm",
    "extract_salt",
    "gen_mix_salt",
    "md5_hex",
    "mix_salt",
    "salt",
]
