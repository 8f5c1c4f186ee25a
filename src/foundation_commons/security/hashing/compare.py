"""Length-constant comparison of secrets."""
from __future__ import annotations

from typing import Any

from foundation_commons.kernel.errors import InvalidArgumentError


def _comparable(value: Any, position: int) -> bytes:
    # None compares as the empty string, numbers as their decimal text
    if value is None:
        return b""
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bool):
        return b"1" if value else b""
    if isinstance(value, (int, float)):
        return str(value).encode("ascii")
    raise InvalidArgumentError("str, bytes, number or None", value, position)


def slow_equals(a: Any, b: Any) -> bool:
    """Compare *a* and *b* in length-constant time.

    The loop always runs ``min(len(a), len(b))`` steps and never exits at the
    first differing byte; a length difference is folded into the result.
    """
    left = _comparable(a, 1)
    right = _comparable(b, 2)
    diff = len(left) ^ len(right)
    for i in range(min(len(left), len(right))):
        diff |= left[i] ^ right[i]
    return diff == 0


__all__ = ["slow_equals"]
