"""Argument errors – a caller passed a value the callee cannot accept."""

from __future__ import annotations

import inspect
from collections.abc import Iterable
from typing import Any

from foundation_commons.kernel.errors.base import BaseError

_PREVIEW_LEN = 50


def describe_type(value: Any) -> str:
    """Short type description used in argument error messages.

    Strings include a quoted, truncated preview of their content::

        describe_type("abc")  # -> 'str ("abc")'
        describe_type(5)      # -> 'int'
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        preview = value if len(value) <= _PREVIEW_LEN else value[:_PREVIEW_LEN] + "..."
        return f'str ("{preview}")'
    return type(value).__name__


def _raising_function(error: BaseException) -> str | None:
    frame = inspect.currentframe()
    try:
        frame = frame.f_back if frame is not None else None
        # skip the __init__ chain of the error itself
        while frame is not None and frame.f_locals.get("self") is error:
            frame = frame.f_back
        if frame is None or frame.f_code.co_name == "<module>":
            return None
        return frame.f_code.co_qualname
    finally:
        del frame


class InvalidArgumentError(BaseError, ValueError):
    """An argument does not have the expected type or value.

    The message names the function that raised the error::

        def derive(count):
            if count <= 0:
                raise InvalidArgumentError("positive integer", count, position=4)

        # -> "derive expected argument 4 to be positive integer, int given."

    Pass ``hide_caller=True`` to leave the function name out.
    """

    default_code = "invalid_argument"

    def __init__(
        self,
        expected: str,
        actual: Any,
        position: int = 1,
        *,
        hide_caller: bool = False,
        **kwargs: Any,
    ) -> None:
        type_desc = describe_type(actual)
        caller = None if hide_caller else _raising_function(self)
        if caller:
            message = f"{caller} expected argument {position} to be {expected}, {type_desc} given."
        else:
            message = f"Expected argument {position} to be {expected}, {type_desc} given."
        detail = {"expected": expected, "given": type_desc, "position": position}
        detail.update(kwargs.pop("detail", None) or {})
        super().__init__(message, detail=detail, **kwargs)
        self.expected = expected
        self.position = position


class UnsupportedAlgorithmError(InvalidArgumentError):
    """An algorithm identifier is outside the supported set."""

    default_code = "unsupported_algorithm"

    def __init__(
        self,
        algorithm: Any,
        supported: Iterable[str],
        position: int = 1,
        **kwargs: Any,
    ) -> None:
        self.algorithm = algorithm
        self.supported = tuple(supported)
        super().__init__(
            f"one of: {', '.join(self.supported)}",
            algorithm,
            position,
            detail={"algorithm": str(algorithm)},
            **kwargs,
        )


__all__ = ["InvalidArgumentError", "UnsupportedAlgorithmError", "describe_type"]
