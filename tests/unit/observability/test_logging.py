"""Unit tests for observability logging."""

from __future__ import annotations

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from pushy_proxy.observability.logging import (
    DEFAULT_SENSITIVE_FIELDS,
    JsonLoggerFactory,
    Logger,
    SensitiveFieldsFilter,
    get_logger,
)
from pushy_proxy.testing.fakes import RecordingLogger


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_api_key(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"api_key": "s3cr3t", "type": "message"})
        assert result["api_key"] == SensitiveFieldsFilter.REDACTED
        assert result["type"] == "message"

    def test_redacts_all_default_sensitive_fields(self) -> None:
        f = SensitiveFieldsFilter()
        data = {field: "value" for field in DEFAULT_SENSITIVE_FIELDS}
        result = f.redact(data)
        for field in DEFAULT_SENSITIVE_FIELDS:
            assert result[field] == SensitiveFieldsFilter.REDACTED

    def test_case_insensitive(self) -> None:
        f = SensitiveFieldsFilter()
        assert f.redact({"API_KEY": "x"})["API_KEY"] == SensitiveFieldsFilter.REDACTED

    def test_redact_deep(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact_deep({"settings": {"secret_api_key": "x", "max_conns": 5}})
        assert result["settings"]["secret_api_key"] == SensitiveFieldsFilter.REDACTED
        assert result["settings"]["max_conns"] == 5

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"device_id"}))
        result = f.redact({"device_id": "abc", "api_key": "k"})
        assert result["device_id"] == SensitiveFieldsFilter.REDACTED
        assert result["api_key"] == "k"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        noisy = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
        yield
        structlog.reset_defaults()
        root.handlers[:] = handlers
        root.setLevel(level)
        for name, lvl in noisy.items():
            logging.getLogger(name).setLevel(lvl)

    def test_redaction_processor(self) -> None:
        processor = JsonLoggerFactory.redaction_processor()
        out = processor(None, "info", {"event": "pushy.sending", "api_key": "k"})
        assert out["api_key"] == SensitiveFieldsFilter.REDACTED
        assert out["event"] == "pushy.sending"

    def test_configure_installs_single_json_handler(self) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
        assert root.level == logging.DEBUG

    def test_configure_quiets_http_client_loggers(self) -> None:
        JsonLoggerFactory.configure(level=logging.DEBUG)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING


# ---------------------------------------------------------------------------
# get_logger / Logger protocol
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("pushy_proxy.test", platform="android_rn").info("pushy.initializing")
        assert logs == [{"platform": "android_rn", "event": "pushy.initializing", "log_level": "info"}]

    def test_without_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("pushy_proxy.test").error("pushy.send_failed", attempts=1)
        assert logs[0]["attempts"] == 1
        assert logs[0]["log_level"] == "error"


class TestRecordingLogger:
    def test_satisfies_protocol(self) -> None:
        logger: Logger = RecordingLogger()
        logger.warning("w", k=1)

    def test_records_levels_and_fields(self) -> None:
        logger = RecordingLogger()
        logger.info("a", x=1)
        logger.error("b", y=2)
        assert logger.events() == ["a", "b"]
        assert logger.events("error") == ["b"]
        assert logger.find("a")[0].fields == {"x": 1}
        logger.reset()
        assert logger.records == []
