"""Security – password hashing, symmetric encryption, random source."""
from foundation_commons.security.encryption import (
    BlockCipherAlgorithm,
    CipherSettings,
    SymmetricCipher,
)
from foundation_commons.security.hashing import (
    DigestAlgorithm,
    EncodedHash,
    HasherConfig,
    HasherSettings,
    PasswordHasher,
    derive,
    slow_equals,
)
from foundation_commons.security.random import random_bytes, random_string

__all__ = [
    "BlockCipherAlgorithm",
    "CipherSettings",
    "DigestAlgorithm",
    "EncodedHash",
    "HasherConfig",
    "HasherSettings",
    "PasswordHasher",
    "SymmetricCipher",
    "derive",
    "random_bytes",
    "random_string",
    "slow_equals",
]
