"""Tests for logging configuration and formatters."""

import json
import logging
import sys

import pytest

from civjobs.logging import ComponentLoggerAdapter, get_logger
from civjobs.logging.config import (
    ContextualFilter,
    JSONFormatter,
    KeyValueFormatter,
    configure_logging,
)
from civjobs.logging.context import clear_log_context, log_context

KV_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@pytest.fixture(autouse=True)
def clean_context():
    clear_log_context()
    yield
    clear_log_context()


def make_record(message="ETL run started", **extra):
    return logging.getLogger("civjobs.test").makeRecord(
        "civjobs.test", logging.INFO, "test.py", 1, message, (), None, extra=extra or None
    )


class TestJSONFormatter:
    """Tests for one-object-per-line JSON output."""

    def test_mandatory_fields(self):
        payload = json.loads(JSONFormatter().format(make_record()))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "civjobs.test"
        assert payload["message"] == "ETL run started"
        assert payload["timestamp"].endswith("Z")
        assert len(payload["timestamp"]) == 24  # 2026-01-01T10:30:00.123Z

    def test_extra_fields_keep_json_types(self):
        record = make_record(event="etl.run.completed", job_count=3, had_unseen=False, keys=["a"])
        payload = json.loads(JSONFormatter().format(record))

        assert payload["event"] == "etl.run.completed"
        assert payload["job_count"] == 3
        assert payload["had_unseen"] is False
        assert payload["keys"] == ["a"]

    def test_non_json_extras_are_stringified(self):
        record = make_record(path=object())
        payload = json.loads(JSONFormatter().format(record))
        assert isinstance(payload["path"], str)

    def test_standard_attributes_not_duplicated(self):
        payload = json.loads(JSONFormatter().format(make_record(event="x")))
        assert "name" not in payload
        assert "levelname" not in payload
        assert "msg" not in payload

    def test_non_ascii_preserved(self):
        payload_text = JSONFormatter().format(make_record("• Bullet snippet"))
        assert "• Bullet snippet" in payload_text


class TestKeyValueFormatter:
    """Tests for human-readable key=value output."""

    def test_base_line_and_sorted_pairs(self):
        formatter = KeyValueFormatter(KV_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        output = formatter.format(make_record(event="etl.run.completed", job_count=3))

        assert "[INFO] civjobs.test: ETL run started" in output
        assert output.endswith("event=etl.run.completed job_count=3")

    def test_value_rendering(self):
        formatter = KeyValueFormatter(KV_FORMAT)
        output = formatter.format(
            make_record(strategy=None, cached=True, note="two words", query_id="abc")
        )

        assert "strategy=null" in output
        assert "cached=true" in output
        assert 'note="two words"' in output
        assert "query_id=abc" in output

    def test_service_and_environment_not_repeated(self):
        record = make_record()
        ContextualFilter(environment="test").filter(record)
        output = KeyValueFormatter(KV_FORMAT).format(record)

        assert "service=" not in output
        assert "environment=" not in output


def test_filter_and_json_formatter_together():
    """Context fields reach the JSON payload through the filter."""
    with log_context(run_id="run-1"):
        record = make_record(event="etl.run.started")
        ContextualFilter(service="civjobs", environment="test").filter(record)

    payload = json.loads(JSONFormatter().format(record))
    assert payload["run_id"] == "run-1"
    assert payload["service"] == "civjobs"
    assert payload["environment"] == "test"


class TestConfigureLogging:
    """Tests for root logger setup."""

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="LOUD")

    def test_invalid_format(self):
        with pytest.raises(ValueError, match="Invalid log format"):
            configure_logging(format_type="xml")

    def test_json_format(self, restore_root_logger):
        configure_logging(level="DEBUG", format_type="json", environment="test")

        assert len(restore_root_logger.handlers) == 1
        handler = restore_root_logger.handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)
        assert restore_root_logger.level == logging.DEBUG

    def test_key_value_format_writes_to_stderr(self, restore_root_logger):
        configure_logging(level="warning", format_type="key-value")

        handler = restore_root_logger.handlers[0]
        assert isinstance(handler.formatter, KeyValueFormatter)
        assert handler.stream is sys.stderr
        assert restore_root_logger.level == logging.WARNING

    def test_handler_carries_contextual_filter(self, restore_root_logger):
        configure_logging(environment="staging")

        filters = restore_root_logger.handlers[0].filters
        assert any(isinstance(f, ContextualFilter) and f.environment == "staging" for f in filters)


class TestGetLogger:
    """Tests for component-bound loggers."""

    def test_plain_logger_without_component(self):
        assert isinstance(get_logger("civjobs.test"), logging.Logger)

    def test_component_is_stamped_on_records(self, caplog):
        logger = get_logger("civjobs.test.component", component="etl")
        assert isinstance(logger, ComponentLoggerAdapter)

        with caplog.at_level(logging.INFO, logger="civjobs.test.component"):
            logger.info("hello", extra={"event": "test.event"})

        record = caplog.records[-1]
        assert record.component == "etl"
        assert record.event == "test.event"
