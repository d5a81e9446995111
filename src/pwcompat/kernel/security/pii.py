"""Kernel security – fields that never reach a log sink unredacted."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "plain", "hashed", "hash", "salt", "secret",
    "token", "api_key", "apikey", "authorization",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
