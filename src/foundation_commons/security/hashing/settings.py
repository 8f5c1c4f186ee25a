"""Security hashing – environment-driven hasher settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from foundation_commons.config.settings import Settings


@dataclass
class HasherSettings(Settings):
    """Hasher parameters, read from ``FOUNDATION_HASHER_*`` variables."""

    _prefix: ClassVar[str] = "FOUNDATION_HASHER"

    algorithm: str = "sha256"
    iterations: int = 1000
    salt_byte_size: int = 24
    hash_byte_size: int = 24


__all__ = ["HasherSettings"]
