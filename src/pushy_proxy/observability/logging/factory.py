"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from pushy_proxy.observability.logging.filters import SensitiveFieldsFilter

# Request lines from these loggers carry the gateway URL, query string included.
_NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "hpack", "h2")


class JsonLoggerFactory:
    """Configure structlog for JSON output through the stdlib root logger."""

    @staticmethod
    def redaction_processor(sensitive_fields: frozenset[str] | None = None) -> Any:
        _filter = SensitiveFieldsFilter(sensitive_fields)

        def _redact(logger: Any, method: Any, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
            return _filter.redact_deep(event_dict)

        return _redact

    @staticmethod
    def configure(level: int = logging.INFO, sensitive_fields: frozenset[str] | None = None) -> None:
        shared_processors: list[Any] = [
            JsonLoggerFactory.redaction_processor(sensitive_fields),
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)

        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(level, logging.WARNING))


__all__ = ["JsonLoggerFactory"]
