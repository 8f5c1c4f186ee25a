"""Kernel security – crypto ports and sensitive field names."""
from foundation_commons.kernel.security.crypto import CipherPort, PasswordHasherPort
from foundation_commons.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = ["CipherPort", "DEFAULT_SENSITIVE_FIELDS", "PasswordHasherPort"]
