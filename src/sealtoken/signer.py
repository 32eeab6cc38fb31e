"""HMAC-SHA256 signing over raw payload bytes."""

import hashlib
import hmac

from sealtoken.errors import TokenKeyError

SIGNATURE_SIZE = hashlib.sha256().digest_size


def _key_bytes(secret: str | bytes) -> bytes:
    if isinstance(secret, str):
        return secret.encode("utf-8")
    if isinstance(secret, (bytes, bytearray, memoryview)):
        return bytes(secret)
    raise TokenKeyError(f"Secret must be str or bytes, not {type(secret).__name__}")


def sign(secret: str | bytes, payload_bytes: bytes) -> bytes:
    """Compute the HMAC-SHA256 of ``payload_bytes`` keyed by ``secret``.

    Deterministic: the same secret and bytes always give the same 32-byte
    digest.

    Raises:
        TokenKeyError: If the secret cannot be used as a MAC key.
    """
    mac = hmac.new(_key_bytes(secret), digestmod=hashlib.sha256)
    mac.update(payload_bytes)
    return mac.digest()


def signatures_match(expected: bytes, actual: bytes) -> bool:
    """Compare two signatures in constant time."""
    return hmac.compare_digest(expected, actual)
