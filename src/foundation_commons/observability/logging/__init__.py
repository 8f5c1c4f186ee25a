"""Observability – structured logging helpers."""
from foundation_commons.observability.logging.factory import JsonLoggerFactory
from foundation_commons.observability.logging.filters import SensitiveFieldsFilter
from foundation_commons.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
