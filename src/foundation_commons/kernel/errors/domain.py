"""Domain errors – state conflicts raised by library objects."""

from __future__ import annotations

from typing import Any

from foundation_commons.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when an object's own rules are broken."""

    default_code = "domain_error"


class NotUniqueError(DomainError):
    """Something is not unique in its scope."""

    default_code = "not_unique"


class ReadOnlyError(DomainError):
    """An attempt was made to overwrite something read-only."""

    default_code = "read_only"


class InvalidFileError(DomainError):
    """A file to be included or loaded is invalid."""

    default_code = "invalid_file"

    def __init__(self, message: str, *, path: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.path = path
        if path is not None:
            self.detail.setdefault("path", path)


__all__ = ["DomainError", "InvalidFileError", "NotUniqueError", "ReadOnlyError"]
