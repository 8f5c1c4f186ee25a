"""Crypto errors – failures of ciphers and other primitives."""

from __future__ import annotations

from foundation_commons.kernel.errors.base import BaseError


class CryptoError(BaseError):
    """A cryptographic operation could not be completed."""

    default_code = "crypto_error"


class DecryptionError(CryptoError):
    """Ciphertext is malformed or was produced under a different key."""

    default_code = "decryption_failed"


__all__ = ["CryptoError", "DecryptionError"]
