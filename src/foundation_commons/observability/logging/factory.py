"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from foundation_commons.kernel.log_levels import LogLevel, to_logging_level
from foundation_commons.observability.logging.filters import SensitiveFieldsFilter


class JsonLoggerFactory:
    """Configure structlog and the stdlib root logger for JSON output.

    Sensitive keys (``password``, ``secret``, ``salt``...) are always
    redacted; pass *sensitive_fields* to replace the default set.
    """

    @staticmethod
    def configure(
        level: int | str | LogLevel = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
    ) -> None:
        if not isinstance(level, int) or isinstance(level, LogLevel):
            level = to_logging_level(level)

        shared_processors: list[Any] = [
            SensitiveFieldsFilter(sensitive_fields),
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


__all__ = ["JsonLoggerFactory"]
