"""Security encryption – environment-driven cipher settings."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from foundation_commons.config.settings import Settings


@dataclass
class CipherSettings(Settings):
    """Cipher secret and algorithm, read from ``FOUNDATION_CIPHER_*`` variables."""

    _prefix: ClassVar[str] = "FOUNDATION_CIPHER"

    secret: str = field(repr=False)
    algorithm: str = "aes"


__all__ = ["CipherSettings"]
