"""Testing fixtures – pytest fixtures for password hashers."""
try:
    import pytest  # noqa: F401

    from pwcompat.testing.fixtures.passwords import (
        bcrypt_hasher,
        md5_hasher,
        md5salt_hasher,
    )

except ImportError:
    pass

__all__ = [
    "bcrypt_hasher",
    "md5_hasher",
    "md5salt_hasher",
]
