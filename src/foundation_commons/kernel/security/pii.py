"""Kernel security – default sensitive field names."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "salt", "derived_key", "key", "iv", "plaintext",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
