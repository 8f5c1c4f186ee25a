"""Kernel – framework-agnostic building blocks."""

from foundation_commons.kernel.errors import (
    ApplicationError,
    BaseError,
    CryptoError,
    DecryptionError,
    DomainError,
    InvalidArgumentError,
    InvalidFileError,
    NotImplementedYetError,
    NotUniqueError,
    ReadOnlyError,
    UnsupportedAlgorithmError,
)
from foundation_commons.kernel.log_levels import LogLevel, evaluate_level

__all__ = [
    "ApplicationError",
    "BaseError",
    "CryptoError",
    "DecryptionError",
    "DomainError",
    "InvalidArgumentError",
    "InvalidFileError",
    "LogLevel",
    "NotImplementedYetError",
    "NotUniqueError",
    "ReadOnlyError",
    "UnsupportedAlgorithmError",
    "evaluate_level",
]
