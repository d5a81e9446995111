"""Shared fixtures for the pwcompat test suite."""
from pwcompat.testing.fixtures import bcrypt_hasher, md5_hasher, md5salt_hasher  # noqa: F401
