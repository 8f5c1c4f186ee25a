"""String hashing with PBKDF2.

Hashes are self-describing, ``algorithm:iterations:salt:key``::

    sha256:1000:lGWhVGUVxQArXgfOckPmJCVZD0l0cYPT:9UMoX8p10AgI7wd1bkvqjuRzTSXv6YF7

Validation always uses the parameters stored in the hash, so the configured
algorithm or iteration count can change without invalidating old hashes.
Callers that keep only the last field (e.g. in a cookie) cannot validate it
later without the other three.
"""
from __future__ import annotations

import dataclasses
from typing import Any

from foundation_commons.config.validation import InvalidSettingValueError
from foundation_commons.kernel.errors import InvalidArgumentError
from foundation_commons.kernel.security import PasswordHasherPort
from foundation_commons.observability.logging import get_logger
from foundation_commons.security.codec import b64encode
from foundation_commons.security.hashing.compare import slow_equals
from foundation_commons.security.hashing.digests import DigestAlgorithm
from foundation_commons.security.hashing.encoded import EncodedHash
from foundation_commons.security.hashing.pbkdf2 import derive
from foundation_commons.security.hashing.settings import HasherSettings
from foundation_commons.security.random import random_bytes

logger = get_logger(__name__)


def _positive_int(name: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        number = int(value.strip())
    else:
        raise InvalidSettingValueError(name, value, "must be a positive integer")
    if number <= 0:
        raise InvalidSettingValueError(name, value, "must be a positive integer")
    return number


@dataclasses.dataclass(frozen=True)
class HasherConfig:
    """Immutable hasher parameters; validated and coerced on construction."""

    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256
    iterations: int = 1000
    salt_byte_size: int = 24
    hash_byte_size: int = 24

    def __post_init__(self) -> None:
        object.__setattr__(self, "algorithm", DigestAlgorithm.parse(self.algorithm))
        for name in ("iterations", "salt_byte_size", "hash_byte_size"):
            object.__setattr__(self, name, _positive_int(name, getattr(self, name)))


class PasswordHasher(PasswordHasherPort):
    """PBKDF2 password hasher producing portable hash strings.

    Usage::

        hasher = PasswordHasher()
        stored = hasher.hash("pa$$word")
        hasher.validate("pa$$word", stored)       # -> True
        hasher.validate("notmypassword", stored)  # -> False

    Raises :class:`InvalidSettingValueError` when a size or count is not a
    positive integer, and :class:`UnsupportedAlgorithmError` for an unknown
    algorithm, both at construction time.
    """

    def __init__(
        self,
        algorithm: str | DigestAlgorithm = "sha256",
        iterations: int | str = 1000,
        salt_byte_size: int | str = 24,
        hash_byte_size: int | str = 24,
    ) -> None:
        self._config = HasherConfig(
            algorithm=algorithm,  # type: ignore[arg-type]
            iterations=iterations,  # type: ignore[arg-type]
            salt_byte_size=salt_byte_size,  # type: ignore[arg-type]
            hash_byte_size=hash_byte_size,  # type: ignore[arg-type]
        )

    @classmethod
    def from_settings(cls, settings: HasherSettings) -> PasswordHasher:
        return cls(
            algorithm=settings.algorithm,
            iterations=settings.iterations,
            salt_byte_size=settings.salt_byte_size,
            hash_byte_size=settings.hash_byte_size,
        )

    @property
    def config(self) -> HasherConfig:
        return self._config

    def hash(self, password: str | bytes) -> str:
        """Hash *password* under a fresh random salt."""
        config = self._config
        salt = b64encode(random_bytes(config.salt_byte_size))
        derived_key = derive(
            config.algorithm,
            password,
            salt,
            config.iterations,
            config.hash_byte_size,
            raw_output=True,
        )
        return str(
            EncodedHash(
                algorithm=config.algorithm.value,
                iterations=config.iterations,
                salt=salt,
                derived_key=derived_key,  # type: ignore[arg-type]
            )
        )

    def validate(self, password: str | bytes, hashed: str) -> bool:
        """Check whether *hashed* is a hash of *password*.

        Never raises for a wrong password or a malformed, tampered or
        foreign hash; those all yield ``False``.

        The iteration count and key length stored in *hashed* are used as
        written, with no upper bound. A hash from an untrusted source can
        therefore make this call arbitrarily slow; only validate hashes
        this application stored itself.
        """
        encoded = EncodedHash.parse(hashed)
        if encoded is None:
            logger.warning("hasher.validate.malformed_hash")
            return False
        if password is None or password in ("", b""):
            return False

        try:
            candidate = derive(
                encoded.algorithm,
                password,
                encoded.salt,
                encoded.iterations,
                len(encoded.derived_key),
                raw_output=True,
            )
        except InvalidArgumentError as exc:
            logger.warning("hasher.validate.rejected_hash", error_code=exc.code, algorithm=encoded.algorithm)
            return False
        return self.slow_equals(encoded.derived_key, candidate)

    def needs_rehash(self, hashed: str) -> bool:
        """True when *hashed* was made with parameters other than the current config."""
        encoded = EncodedHash.parse(hashed)
        if encoded is None:
            return True
        try:
            algorithm = DigestAlgorithm.parse(encoded.algorithm)
        except InvalidArgumentError:
            return True
        config = self._config
        return (
            algorithm is not config.algorithm
            or encoded.iterations != config.iterations
            or len(encoded.derived_key) != config.hash_byte_size
        )

    @staticmethod
    def slow_equals(a: Any, b: Any) -> bool:
        return slow_equals(a, b)

    def __repr__(self) -> str:
        c = self._config
        return (
            f"PasswordHasher(algorithm={c.algorithm.value!r}, iterations={c.iterations}, "
            f"salt_byte_size={c.salt_byte_size}, hash_byte_size={c.hash_byte_size})"
        )


__all__ = ["HasherConfig", "PasswordHasher"]
