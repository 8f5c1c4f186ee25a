"""Self-describing hash string: ``algorithm:iterations:salt:derived_key``."""
from __future__ import annotations

import dataclasses
from typing import Any

from foundation_commons.security.codec import b64decode, b64encode

HASH_SECTIONS = 4
HASH_ALGORITHM_INDEX = 0
HASH_ITERATION_INDEX = 1
HASH_SALT_INDEX = 2
HASH_PBKDF2_INDEX = 3
SEPARATOR = ":"


@dataclasses.dataclass(frozen=True)
class EncodedHash:
    """Parsed form of a stored password hash.

    ``salt`` stays in its base64 text form: that text, not the decoded
    bytes, is the PBKDF2 salt input. ``derived_key`` is decoded, and its
    length sets the key length used when validating.
    """

    algorithm: str
    iterations: int
    salt: str
    derived_key: bytes

    @classmethod
    def parse(cls, value: Any) -> EncodedHash | None:
        """Return the parsed hash, or ``None`` when *value* is not one.

        Exactly four ``:``-separated fields are required; the iteration
        count must be a positive decimal integer and the key valid base64.
        """
        if not isinstance(value, str):
            return None
        fields = value.split(SEPARATOR)
        if len(fields) != HASH_SECTIONS:
            return None

        iterations = fields[HASH_ITERATION_INDEX]
        if not (iterations.isascii() and iterations.isdigit()) or int(iterations) <= 0:
            return None
        try:
            derived_key = b64decode(fields[HASH_PBKDF2_INDEX])
        except ValueError:
            return None
        if not derived_key:
            return None

        return cls(
            algorithm=fields[HASH_ALGORITHM_INDEX],
            iterations=int(iterations),
            salt=fields[HASH_SALT_INDEX],
            derived_key=derived_key,
        )

    def __str__(self) -> str:
        return SEPARATOR.join(
            (self.algorithm, str(self.iterations), self.salt, b64encode(self.derived_key))
        )


__all__ = [
    "EncodedHash",
    "HASH_ALGORITHM_INDEX",
    "HASH_ITERATION_INDEX",
    "HASH_PBKDF2_INDEX",
    "HASH_SALT_INDEX",
    "HASH_SECTIONS",
    "SEPARATOR",
]
