"""Security – supported digest algorithms for HMAC / PBKDF2."""
from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any

from foundation_commons.kernel.errors import UnsupportedAlgorithmError


class DigestAlgorithm(str, Enum):
    """Digest identifiers accepted in hash strings.

    Values are the identifiers written into hash strings; :meth:`parse`
    matches them case-insensitively.
    """

    MD5 = "md5"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_224 = "sha3-224"
    SHA3_256 = "sha3-256"
    SHA3_384 = "sha3-384"
    SHA3_512 = "sha3-512"

    @property
    def hashlib_name(self) -> str:
        return self.value.replace("-", "_")

    @property
    def digest_size(self) -> int:
        return hashlib.new(self.hashlib_name).digest_size

    @classmethod
    def parse(cls, algorithm: Any, position: int = 1) -> DigestAlgorithm:
        """Canonicalise *algorithm* (lowercase) and look it up.

        Raises :class:`UnsupportedAlgorithmError` for anything outside the set.
        """
        if isinstance(algorithm, cls):
            return algorithm
        if isinstance(algorithm, str):
            try:
                return cls(algorithm.lower())
            except ValueError:
                pass
        raise UnsupportedAlgorithmError(algorithm, [a.value for a in cls], position)


__all__ = ["DigestAlgorithm"]
