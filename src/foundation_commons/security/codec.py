"""Security – byte/text conversions shared by the crypto modules."""
from __future__ import annotations

import base64
import binascii
from typing import Any

from foundation_commons.kernel.errors import InvalidArgumentError


def to_bytes(value: Any, position: int = 1) -> bytes:
    """UTF-8 encode ``str``; pass ``bytes``-like values through.

    *position* is the argument position in the calling operation, so the
    error message does not name this helper.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise InvalidArgumentError("str or bytes", value, position, hide_caller=True)


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode(text: str | bytes) -> bytes:
    """Strict base64 decoding; raises :class:`ValueError` on malformed input."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"invalid base64 data: {exc}") from exc


__all__ = ["b64decode", "b64encode", "to_bytes"]
