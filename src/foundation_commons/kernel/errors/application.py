"""Application-layer errors – cross-cutting concerns at use-case level."""

from __future__ import annotations

import inspect
from typing import Any

from foundation_commons.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class NotImplementedYetError(ApplicationError, NotImplementedError):
    """Marks a function that has not been fully implemented yet.

    Leave ``message`` empty to name the calling function and its file::

        def export():
            raise NotImplementedYetError()

        # -> Function "export" defined in "reports.py" has not been fully implemented yet.
    """

    default_code = "not_implemented"

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self._describe_caller() or "Not implemented yet."
        super().__init__(message, **kwargs)

    def _describe_caller(self) -> str | None:
        frame = inspect.currentframe()
        try:
            frame = frame.f_back if frame is not None else None
            while frame is not None and frame.f_locals.get("self") is self:
                frame = frame.f_back
            if frame is None:
                return None
            return (
                f'Function "{frame.f_code.co_qualname}" defined in '
                f'"{frame.f_code.co_filename}" has not been fully implemented yet.'
            )
        finally:
            del frame


__all__ = ["ApplicationError", "NotImplementedYetError"]
