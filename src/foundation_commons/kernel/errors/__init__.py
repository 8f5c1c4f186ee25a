"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── InvalidArgumentError      (argument.py, also a ValueError)
    │   └── UnsupportedAlgorithmError
    ├── DomainError               (domain.py)
    │   ├── NotUniqueError
    │   ├── ReadOnlyError
    │   └── InvalidFileError
    ├── ApplicationError          (application.py)
    │   └── NotImplementedYetError (also a NotImplementedError)
    └── CryptoError               (crypto.py)
        └── DecryptionError
"""

from foundation_commons.kernel.errors.application import ApplicationError, NotImplementedYetError
from foundation_commons.kernel.errors.argument import (
    InvalidArgumentError,
    UnsupportedAlgorithmError,
    describe_type,
)
from foundation_commons.kernel.errors.base import BaseError
from foundation_commons.kernel.errors.crypto import CryptoError, DecryptionError
from foundation_commons.kernel.errors.domain import (
    DomainError,
    InvalidFileError,
    NotUniqueError,
    ReadOnlyError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CryptoError",
    "DecryptionError",
    "DomainError",
    "InvalidArgumentError",
    "InvalidFileError",
    "NotImplementedYetError",
    "NotUniqueError",
    "ReadOnlyError",
    "UnsupportedAlgorithmError",
    "describe_type",
]
