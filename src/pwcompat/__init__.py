"""
pwcompat – multi-scheme password hashing.

Import path convention::

    from pwcompat.security.passwords import LegacyPasswordHasher, PasswordSettings
    from pwcompat.security.passwords import determine_hash_algorithm, extract_salt
    from pwcompat.kernel.errors import InvalidHashFormatError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
