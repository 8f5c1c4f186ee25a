"""Security – symmetric encryption."""
from foundation_commons.security.encryption.cipher import BlockCipherAlgorithm, SymmetricCipher
from foundation_commons.security.encryption.settings import CipherSettings

__all__ = ["BlockCipherAlgorithm", "CipherSettings", "SymmetricCipher"]
