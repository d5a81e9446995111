"""Unit tests for observability logging."""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Iterator

import pytest
import structlog

from pwcompat.kernel.security import DEFAULT_SENSITIVE_FIELDS
from pwcompat.observability.logging import (
    JsonLoggerFactory,
    RedactionProcessor,
    SensitiveFieldsFilter,
    get_logger,
)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"password": "s3cr3t", "algorithm": "md5"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["algorithm"] == "md5"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        data = {field: "value" for field in DEFAULT_SENSITIVE_FIELDS}
        result = f.redact(data)
        for field in DEFAULT_SENSITIVE_FIELDS:
            assert result[field] == SensitiveFieldsFilter.REDACTED

    def test_hash_and_salt_are_sensitive(self) -> None:
        assert {"hash", "hashed", "salt"} <= DEFAULT_SENSITIVE_FIELDS

    def test_case_insensitive_key_matching(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"PASSWORD": "p", "Salt": "s", "normal": "ok"})
        assert result["PASSWORD"] == SensitiveFieldsFilter.REDACTED
        assert result["Salt"] == SensitiveFieldsFilter.REDACTED
        assert result["normal"] == "ok"

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"pin"}))
        result = f.redact({"pin": "1234", "password": "keep"})
        assert result["pin"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "keep"

    def test_redact_deep_nested(self) -> None:
        f = SensitiveFieldsFilter()
        data: dict[str, Any] = {"user": "alice", "credentials": {"password": "hunter2"}}
        result = f.redact_deep(data)
        assert result["user"] == "alice"
        assert result["credentials"]["password"] == SensitiveFieldsFilter.REDACTED

    def test_redact_does_not_modify_original(self) -> None:
        original = {"password": "secret"}
        SensitiveFieldsFilter().redact(original)
        assert original["password"] == "secret"


# ---------------------------------------------------------------------------
# RedactionProcessor / get_logger
# ---------------------------------------------------------------------------


class TestRedactionProcessor:
    def test_masks_event_dict(self) -> None:
        processor = RedactionProcessor()
        result = processor(None, "info", {"event": "login", "password": "pw"})
        assert result == {"event": "login", "password": SensitiveFieldsFilter.REDACTED}

    def test_custom_fields(self) -> None:
        processor = RedactionProcessor(frozenset({"pin"}))
        assert processor(None, "info", {"pin": 1})["pin"] == SensitiveFieldsFilter.REDACTED


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("pwcompat.test", component="hasher").info("ready")
        assert logs == [{"event": "ready", "component": "hasher", "log_level": "info"}]

    def test_without_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("pwcompat.test").warning("careful")
        assert logs[0]["event"] == "careful"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


class TestJsonLoggerFactory:
    def test_configure_installs_json_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_redaction_runs_after_context_merge(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(sensitive_fields=frozenset({"pin"}))
        processors = structlog.get_config()["processors"]
        assert processors[0] is structlog.contextvars.merge_contextvars
        assert isinstance(processors[1], RedactionProcessor)
        assert processors[1](None, "info", {"pin": 1})["pin"] == SensitiveFieldsFilter.REDACTED

    def test_json_output_masks_bound_and_context_values(self, restore_logging: None) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.DEBUG, stream=stream)
        structlog.contextvars.bind_contextvars(password="hunter2", request_id="r-1")
        get_logger("pwcompat.test").info("login", hashed="$2b$04$abc", algorithm="bcrypt")
        record = json.loads(stream.getvalue().splitlines()[-1])
        assert record["event"] == "login"
        assert record["password"] == SensitiveFieldsFilter.REDACTED
        assert record["hashed"] == SensitiveFieldsFilter.REDACTED
        assert record["request_id"] == "r-1"
        assert record["algorithm"] == "bcrypt"
        assert "hunter2" not in stream.getvalue()


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("pwcompat.observability.logging")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing"
