"""Kernel – framework-agnostic error hierarchy and security ports."""

from pwcompat.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidHashFormatError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidHashFormatError",
]
