"""Security – password hashing (PBKDF2) and constant-time comparison."""
from foundation_commons.security.hashing.compare import slow_equals
from foundation_commons.security.hashing.digests import DigestAlgorithm
from foundation_commons.security.hashing.encoded import HASH_SECTIONS, EncodedHash
from foundation_commons.security.hashing.hasher import HasherConfig, PasswordHasher
from foundation_commons.security.hashing.pbkdf2 import derive
from foundation_commons.security.hashing.settings import HasherSettings

__all__ = [
    "DigestAlgorithm",
    "EncodedHash",
    "HASH_SECTIONS",
    "HasherConfig",
    "HasherSettings",
    "PasswordHasher",
    "derive",
    "slow_equals",
]
