"""Kernel security – PasswordHasher, Cipher ports."""
from __future__ import annotations

import abc


class PasswordHasherPort(abc.ABC):
    """Port: one-way password hashing."""

    @abc.abstractmethod
    def hash(self, password: str | bytes) -> str: ...

    @abc.abstractmethod
    def validate(self, password: str | bytes, hashed: str) -> bool: ...


class CipherPort(abc.ABC):
    """Port: symmetric encryption / decryption of text."""

    @abc.abstractmethod
    def encrypt(self, plaintext: str | bytes) -> str: ...

    @abc.abstractmethod
    def decrypt(self, ciphertext: str | bytes) -> str: ...


__all__ = ["CipherPort", "PasswordHasherPort"]
