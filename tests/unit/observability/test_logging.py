"""Unit tests for observability logging."""

from __future__ import annotations

import json
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from callmemaybe.observability.logging import (
    CONTACT_FIELDS,
    ContactFieldsFilter,
    JsonLoggerFactory,
    get_logger,
)
from callmemaybe.sorting import Category, get_comparator


@pytest.fixture(autouse=True)
def _reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


class TestContactFieldsFilter:
    def test_redacts_contact_keys(self) -> None:
        f = ContactFieldsFilter()
        out = f.redact({"name": "Alice", "phone": "9123", "count": 3})
        assert out == {"name": "[REDACTED]", "phone": "[REDACTED]", "count": 3}

    def test_case_insensitive_keys(self) -> None:
        assert ContactFieldsFilter().redact({"Email": "a@b.c"}) == {"Email": "[REDACTED]"}

    def test_redact_deep(self) -> None:
        out = ContactFieldsFilter().redact_deep({"query": {"raw": "n/alice", "mode": "any"}})
        assert out == {"query": {"raw": "[REDACTED]", "mode": "any"}}

    def test_custom_fields(self) -> None:
        f = ContactFieldsFilter(frozenset({"secret"}))
        assert f.redact({"secret": 1, "name": "Alice"}) == {"secret": "[REDACTED]", "name": "Alice"}

    def test_works_as_processor(self) -> None:
        event = ContactFieldsFilter()(None, "info", {"event": "x", "address": "Jurong"})
        assert event["address"] == "[REDACTED]"

    def test_default_fields(self) -> None:
        assert {"name", "phone", "email", "address"} <= CONTACT_FIELDS


class TestJsonLoggerFactory:
    def test_configure_installs_single_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.WARNING)
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_configure_with_sensitive_fields(self) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG, sensitive_fields=frozenset({"my_secret"}))
        assert logging.getLogger().level == logging.DEBUG

    def test_context_bound_contact_data_is_redacted(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(level=logging.INFO)
        structlog.contextvars.bind_contextvars(name="Alice Tan", command="find")
        try:
            get_logger("context").info("lookup", email="alice@example.com")
        finally:
            structlog.contextvars.clear_contextvars()
        line = capsys.readouterr().err.strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["name"] == "[REDACTED]"
        assert entry["email"] == "[REDACTED]"
        assert entry["command"] == "find"
        assert "Alice" not in line


class TestGetLogger:
    def test_bound_values(self) -> None:
        with capture_logs() as logs:
            get_logger("test", component="query").info("hello")
        assert logs == [{"component": "query", "event": "hello", "log_level": "info"}]

    def test_engine_logs_category_selection(self) -> None:
        with capture_logs() as logs:
            get_comparator(Category.AGE)
        assert {"event": "comparator_selected", "category": "age", "log_level": "debug"} in logs
