"""Kernel security – PasswordHasher port and default sensitive fields."""
from pwcompat.kernel.security.crypto import PasswordHasher
from pwcompat.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = ["DEFAULT_SENSITIVE_FIELDS", "PasswordHasher"]
