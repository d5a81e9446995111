"""Observability – redaction and get_logger helper.

Stored hashes, salts and plaintexts are credentials; every structlog event
goes through :class:`RedactionProcessor` once :class:`JsonLoggerFactory`
has configured logging.
"""
from __future__ import annotations

from typing import Any

import structlog

from pwcompat.kernel.security import DEFAULT_SENSITIVE_FIELDS


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``.

    Key matching is case-insensitive. Inputs are never mutated.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if self.is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for k, v in data.items():
            if self.is_sensitive(k):
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result


class RedactionProcessor:
    """structlog processor applying :class:`SensitiveFieldsFilter` to each event.

    Usage::

        import structlog
        from pwcompat.observability.logging import RedactionProcessor

        structlog.configure(processors=[RedactionProcessor(), ...])
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._filter.redact_deep(event_dict)


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to *initial_values*.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["RedactionProcessor", "SensitiveFieldsFilter", "get_logger"]
