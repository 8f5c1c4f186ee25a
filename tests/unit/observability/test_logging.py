"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
import structlog

from foundation_commons.kernel.log_levels import LogLevel
from foundation_commons.kernel.security import DEFAULT_SENSITIVE_FIELDS
from foundation_commons.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_known_sensitive_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"password": "s3cr3t", "name": "alice"})
        assert result["password"] == SensitiveFieldsFilter.REDACTED
        assert result["name"] == "alice"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        data = {field: "value" for field in DEFAULT_SENSITIVE_FIELDS}
        result = f.redact(data)
        for field in DEFAULT_SENSITIVE_FIELDS:
            assert result[field] == SensitiveFieldsFilter.REDACTED

    def test_crypto_parameters_are_not_redacted(self) -> None:
        f = SensitiveFieldsFilter()
        data = {"algorithm": "sha256", "iterations": 1000, "key_length": 24}
        assert f.redact(data) == data

    def test_case_insensitive_key_matching(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"PASSWORD": "p", "Salt": "s", "normal": "ok"})
        assert result["PASSWORD"] == SensitiveFieldsFilter.REDACTED
        assert result["Salt"] == SensitiveFieldsFilter.REDACTED
        assert result["normal"] == "ok"

    def test_custom_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter(sensitive_fields=frozenset({"secret_key"}))
        result = f.redact({"secret_key": "abc", "password": "keep"})
        assert result["secret_key"] == SensitiveFieldsFilter.REDACTED
        assert result["password"] == "keep"

    def test_redact_deep_nested(self) -> None:
        f = SensitiveFieldsFilter()
        data: dict[str, Any] = {
            "user": "alice",
            "credentials": {"password": "hunter2", "token": "abc123"},
        }
        result = f.redact_deep(data)
        assert result["user"] == "alice"
        assert result["credentials"]["password"] == SensitiveFieldsFilter.REDACTED
        assert result["credentials"]["token"] == SensitiveFieldsFilter.REDACTED

    def test_redact_does_not_modify_original(self) -> None:
        f = SensitiveFieldsFilter()
        original = {"password": "secret", "name": "alice"}
        f.redact(original)
        assert original["password"] == "secret"

    def test_usable_as_processor(self) -> None:
        f = SensitiveFieldsFilter()
        result = f(None, "info", {"event": "login", "secret": "x"})
        assert result == {"event": "login", "secret": SensitiveFieldsFilter.REDACTED}


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_bound_values_reach_event(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("tests", component="hasher").info("hello", attempt=1)
        assert logs == [
            {"event": "hello", "component": "hasher", "attempt": 1, "log_level": "info"}
        ]

    def test_unbound_logger(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger(__name__).warning("careful")
        assert logs[0]["event"] == "careful"
        assert logs[0]["log_level"] == "warning"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("debug", logging.DEBUG), ("notice", logging.INFO), (LogLevel.ERROR, logging.ERROR)],
    )
    def test_configure_accepts_named_levels(self, level, expected: int) -> None:
        JsonLoggerFactory.configure(level=level)
        assert logging.getLogger().level == expected

    def test_emits_json_with_redaction(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        get_logger("tests.json").info("user.login", user="alice", password="hunter2")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "user.login"
        assert payload["user"] == "alice"
        assert payload["password"] == SensitiveFieldsFilter.REDACTED
        assert payload["level"] == "info"

    def test_configure_with_custom_sensitive_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO, sensitive_fields=frozenset({"pin"}))
        get_logger("tests.json").info("card.used", pin="1234")
        payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert payload["pin"] == SensitiveFieldsFilter.REDACTED
