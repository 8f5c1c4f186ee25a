"""PBKDF2 key derivation as defined by RSA's PKCS #5 (RFC 2898).

Test vectors: RFC 6070 (HMAC-SHA1).

The pseudorandom function is HMAC keyed with the password. For each output
block ``i`` the function computes ``U1 = HMAC(salt || INT(i))`` and
``Uj = HMAC(Uj-1)`` up to the iteration count, XORs all of them into the
block, then the blocks are concatenated and truncated to the key length.
"""
from __future__ import annotations

import hmac
import struct
from typing import Any

from foundation_commons.kernel.errors import InvalidArgumentError
from foundation_commons.observability.logging import get_logger
from foundation_commons.security.codec import to_bytes
from foundation_commons.security.hashing.digests import DigestAlgorithm

logger = get_logger(__name__)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def derive(
    algorithm: str | DigestAlgorithm,
    password: str | bytes,
    salt: str | bytes,
    count: int,
    key_length: int,
    raw_output: bool = False,
) -> bytes | str:
    """Derive *key_length* bytes from *password* and *salt*.

    Parameters
    ----------
    algorithm:
        Digest name, case-insensitive. See :class:`DigestAlgorithm`.
    password:
        Non-empty ``str`` (UTF-8 encoded) or ``bytes``.
    salt:
        ``str`` (UTF-8 encoded) or ``bytes``.
    count:
        Iteration count. Higher is slower and stronger.
    key_length:
        Length of the derived key in bytes.
    raw_output:
        Return raw ``bytes`` when true, a lowercase hex ``str`` otherwise.

    Raises
    ------
    UnsupportedAlgorithmError
        *algorithm* is not a supported digest.
    InvalidArgumentError
        Empty password, or a non-positive *count* / *key_length*.
    """
    digest = DigestAlgorithm.parse(algorithm, position=1)
    secret = to_bytes(password, 2) if password is not None else b""
    if not secret:
        raise InvalidArgumentError("non-empty string", password, 2)
    salt_bytes = to_bytes(salt, 3)
    if not _is_positive_int(count):
        raise InvalidArgumentError("positive integer", count, 4)
    if not _is_positive_int(key_length):
        raise InvalidArgumentError("positive integer", key_length, 5)

    prf = hmac.new(secret, digestmod=digest.hashlib_name)
    block_count = -(-key_length // digest.digest_size)
    logger.debug(
        "pbkdf2.derive",
        algorithm=digest.value,
        iterations=count,
        key_length=key_length,
        blocks=block_count,
    )

    output = b"".join(
        _block(prf, salt_bytes + struct.pack(">I", index), count)
        for index in range(1, block_count + 1)
    )[:key_length]
    return output if raw_output else output.hex()


def _block(prf: hmac.HMAC, message: bytes, count: int) -> bytes:
    last = _mac(prf, message)
    xorsum = int.from_bytes(last, "big")
    for _ in range(count - 1):
        last = _mac(prf, last)
        xorsum ^= int.from_bytes(last, "big")
    return xorsum.to_bytes(len(last), "big")


def _mac(prf: hmac.HMAC, message: bytes) -> bytes:
    # prf is keyed once; copies skip re-hashing the padded key
    mac = prf.copy()
    mac.update(message)
    return mac.digest()


__all__ = ["derive"]
