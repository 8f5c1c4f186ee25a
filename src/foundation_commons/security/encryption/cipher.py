"""Symmetric encryption of strings under a passphrase-derived key.

The key is the SHA-256 digest of the secret: a fixed-length key, not a
password hash. Each :meth:`SymmetricCipher.encrypt` call draws a fresh IV and
prepends it to the ciphertext, so output is ``base64(iv || ciphertext)`` and
encrypting the same text twice gives different tokens.

Usage::

    cipher = SymmetricCipher("thisismysecret")
    token = cipher.encrypt("Hide from NSA... not really...")
    cipher.decrypt(token)  # -> 'Hide from NSA... not really...'
"""
from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any

from cryptography.hazmat.decrepit.ciphers.algorithms import Camellia
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, CipherAlgorithm, algorithms, modes

from foundation_commons.kernel.errors import DecryptionError, UnsupportedAlgorithmError
from foundation_commons.kernel.security import CipherPort
from foundation_commons.observability.logging import get_logger
from foundation_commons.security.codec import b64decode, b64encode, to_bytes
from foundation_commons.security.encryption.settings import CipherSettings
from foundation_commons.security.random import random_bytes

logger = get_logger(__name__)


class BlockCipherAlgorithm(str, Enum):
    """Block ciphers available to :class:`SymmetricCipher` (256-bit keys)."""

    AES = "aes"
    CAMELLIA = "camellia"

    def build(self, key: bytes) -> CipherAlgorithm:
        if self is BlockCipherAlgorithm.CAMELLIA:
            return Camellia(key)
        return algorithms.AES(key)

    @property
    def block_size(self) -> int:
        """Block size in bits."""
        return 128

    @classmethod
    def parse(cls, algorithm: Any, position: int = 1) -> BlockCipherAlgorithm:
        if isinstance(algorithm, cls):
            return algorithm
        if isinstance(algorithm, str):
            try:
                return cls(algorithm.lower())
            except ValueError:
                pass
        raise UnsupportedAlgorithmError(algorithm, [a.value for a in cls], position)


class SymmetricCipher(CipherPort):
    """CBC-mode block cipher with PKCS#7 padding and a per-message IV."""

    def __init__(
        self,
        secret: str | bytes,
        algorithm: str | BlockCipherAlgorithm = BlockCipherAlgorithm.AES,
    ) -> None:
        self._key = hashlib.sha256(to_bytes(secret, 1)).digest()
        self._algorithm = BlockCipherAlgorithm.parse(algorithm, position=2)

    @classmethod
    def from_settings(cls, settings: CipherSettings) -> SymmetricCipher:
        return cls(settings.secret, algorithm=settings.algorithm)

    @property
    def algorithm(self) -> BlockCipherAlgorithm:
        return self._algorithm

    @property
    def iv_size(self) -> int:
        """IV length in bytes (one cipher block)."""
        return self._algorithm.block_size // 8

    def encrypt(self, plaintext: str | bytes) -> str:
        """Encrypt *plaintext* and return ``base64(iv || ciphertext)``."""
        iv = random_bytes(self.iv_size)
        padder = padding.PKCS7(self._algorithm.block_size).padder()
        padded = padder.update(to_bytes(plaintext, 1)) + padder.finalize()
        encryptor = self._cipher(iv).encryptor()
        return b64encode(iv + encryptor.update(padded) + encryptor.finalize())

    def decrypt(self, ciphertext: str | bytes) -> str:
        """Decrypt a token produced by :meth:`encrypt`.

        Raises :class:`DecryptionError` when the token is not base64, is
        truncated, or does not decrypt to correctly padded UTF-8 text (the
        usual result of a wrong secret).
        """
        try:
            raw = b64decode(ciphertext)
        except (TypeError, ValueError) as exc:
            raise DecryptionError("Ciphertext is not valid base64", cause=exc) from exc

        iv_size = self.iv_size
        if len(raw) < 2 * iv_size or len(raw) % iv_size:
            raise DecryptionError(
                "Ciphertext has an invalid length",
                detail={"length": len(raw), "block_bytes": iv_size},
            )

        decryptor = self._cipher(raw[:iv_size]).decryptor()
        padded = decryptor.update(raw[iv_size:]) + decryptor.finalize()
        unpadder = padding.PKCS7(self._algorithm.block_size).unpadder()
        try:
            data = unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            logger.warning("cipher.decrypt.bad_padding", algorithm=self._algorithm.value)
            raise DecryptionError("Invalid padding: wrong secret or corrupted ciphertext", cause=exc) from exc
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecryptionError("Decrypted data is not UTF-8 text", cause=exc) from exc

    def _cipher(self, iv: bytes) -> Cipher:
        return Cipher(self._algorithm.build(self._key), modes.CBC(iv))

    def __repr__(self) -> str:
        return f"SymmetricCipher(algorithm={self._algorithm.value!r})"


__all__ = ["BlockCipherAlgorithm", "SymmetricCipher"]
