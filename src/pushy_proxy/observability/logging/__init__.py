"""Observability – structured logging ports and helpers."""
from pushy_proxy.observability.logging.protocol import Logger
from pushy_proxy.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from pushy_proxy.observability.logging.factory import JsonLoggerFactory
from pushy_proxy.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "Logger",
    "SensitiveFieldsFilter",
    "get_logger",
]
