"""Domain errors – rejected password hash records."""

from __future__ import annotations

from typing import Any

from pwcompat.kernel.errors.base import BaseError

_PREVIEW_LEN = 4


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class InvalidHashFormatError(DomainError, ValueError):
    """A stored hash matches none of the recognised record shapes.

    Only a short prefix of the rejected value is kept in ``detail``; stored
    hashes are credentials and must not end up in logs whole.
    """

    default_code = "invalid_hash_format"

    def __init__(self, hashed: str, **kwargs: Any) -> None:
        preview = hashed[:_PREVIEW_LEN] + "…" if len(hashed) > _PREVIEW_LEN else hashed
        detail = {"preview": preview, "length": len(hashed)}
        super().__init__("Unrecognised password hash format", detail=detail, **kwargs)
        self.length = len(hashed)


__all__ = ["DomainError", "InvalidHashFormatError"]
