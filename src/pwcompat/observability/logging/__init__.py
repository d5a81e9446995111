"""Observability – structured logging helpers."""
from pwcompat.observability.logging.factory import JsonLoggerFactory
from pwcompat.observability.logging.processors import (
    RedactionProcessor,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = [
    "JsonLoggerFactory",
    "RedactionProcessor",
    "SensitiveFieldsFilter",
    "get_logger",
]
