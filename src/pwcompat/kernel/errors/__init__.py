"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── InvalidHashFormatError
    └── ApplicationError         (application.py)
        └── ConfigError          (pwcompat.config.validation)
"""

from pwcompat.kernel.errors.application import ApplicationError
from pwcompat.kernel.errors.base import BaseError
from pwcompat.kernel.errors.domain import DomainError, InvalidHashFormatError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidHashFormatError",
]
