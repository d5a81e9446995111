"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from pwcompat.observability.logging.processors import RedactionProcessor


class JsonLoggerFactory:
    """Route structlog and stdlib records through one JSON handler on the root logger.

    Redaction runs after context variables are merged, so a password or
    hash bound with :func:`structlog.contextvars.bind_contextvars` is masked
    like any other event key.
    """

    @staticmethod
    def shared_processors(sensitive_fields: frozenset[str] | None = None) -> list[Any]:
        return [
            structlog.contextvars.merge_contextvars,
            RedactionProcessor(sensitive_fields),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

    @classmethod
    def configure(
        cls,
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        structlog.configure(
            processors=[
                *cls.shared_processors(sensitive_fields),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(),
                ],
            )
        )
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
