"""
foundation_commons – foundation library: credential hashing, ciphers, errors.

Import path convention::

    from foundation_commons.kernel.errors import InvalidArgumentError
    from foundation_commons.security.hashing import PasswordHasher
    from foundation_commons.security.encryption import SymmetricCipher
    from foundation_commons.observability.logging import get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
