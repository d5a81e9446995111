"""Security – multi-scheme password hashing."""
from pwcompat.security.passwords import (
    BcryptAdapter,
    HashAlgorithm,
    LegacyPasswordHasher,
    PasswordSettings,
    determine_hash_algorithm,
    extract_salt,
    gen_mix_salt,
    md5_hex,
    mix_salt,
    salt,
)

__all__ = [
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
