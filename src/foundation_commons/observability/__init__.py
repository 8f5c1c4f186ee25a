"""Observability – structured logging."""

from foundation_commons.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
