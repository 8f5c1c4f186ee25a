"""Security – cryptographically secure random source."""
from __future__ import annotations

import os
import secrets
import string

from foundation_commons.kernel.errors import InvalidArgumentError

_BASE_CHARS = "1234567890abcdefghijkmnopqrstuvwxyz"
_PUNCTUATION = "?!.,;:^#@&"


def random_bytes(size: int) -> bytes:
    """Return *size* bytes from the operating system's CSPRNG."""
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidArgumentError("positive integer", size)
    return os.urandom(size)


def random_string(length: int = 16, capitals: bool = True, punctuation: bool = False) -> str:
    """Random alphanumeric string.

    Uniqueness is not checked, so do not use it as an id generator.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidArgumentError("positive integer", length)
    chars = _BASE_CHARS
    if capitals:
        chars += string.ascii_uppercase
    if punctuation:
        chars += _PUNCTUATION
    return "".join(secrets.choice(chars) for _ in range(length))


__all__ = ["random_bytes", "random_string"]
