"""Token verification: signature first, then deserialization, then expiration."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, Protocol, runtime_checkable

from sealtoken.codec import decode_segment, deserialize_payload, split_token
from sealtoken.errors import DeserializationError, ExpiredError, SignatureError, TokenError
from sealtoken.signer import sign, signatures_match

logger = logging.getLogger("sealtoken.verifier")


@runtime_checkable
class Expirable(Protocol):
    """A payload that knows when it stops being valid.

    ``exp`` is a Unix timestamp in seconds (UTC). A dataclass or model field,
    a plain attribute and a property all satisfy the protocol.
    """

    @property
    def exp(self) -> int: ...


def _now() -> int:
    return int(datetime.now(UTC).timestamp())


def read_expiration(payload: Any) -> int:
    """Return the expiration timestamp of a deserialized payload.

    Mappings are read through their ``"exp"`` key, other payloads through the
    ``exp`` attribute (called if it is a method).

    Raises:
        DeserializationError: If the expiration is missing or not an integer.
        TypeError: If the payload type has no way to express an expiration.
    """
    if isinstance(payload, Mapping):
        if "exp" not in payload:
            raise DeserializationError("Payload has no 'exp' claim")
        exp = payload["exp"]
    elif isinstance(payload, Expirable):
        exp = payload.exp
        if callable(exp):
            exp = exp()
    else:
        raise TypeError(f"{type(payload).__name__} does not expose an 'exp' expiration")

    if isinstance(exp, bool) or not isinstance(exp, int):
        raise DeserializationError("Payload 'exp' must be an integer timestamp")
    return exp


def verify_token(secret: str | bytes, token: str, payload_type: Any = None) -> Any:
    """Verify a token and return its payload.

    Checks, in order: format, base64url encoding, signature, payload
    structure, expiration. The payload bytes are only deserialized after the
    signature has matched. A token whose ``exp`` equals the current second is
    still valid.

    Args:
        secret: The secret the token was created with.
        token: The token string.
        payload_type: Optional type to validate the payload into. Must expose
            ``exp`` (see :class:`Expirable`); mappings use the ``"exp"`` key.

    Raises:
        FormatError, EncodingError, SignatureError, DeserializationError,
        ExpiredError, TokenKeyError: See :mod:`sealtoken.errors`.
    """
    try:
        payload_segment, signature_segment = split_token(token)
        payload_bytes = decode_segment(payload_segment)
        signature = decode_segment(signature_segment)

        expected = sign(secret, payload_bytes)
        if not signatures_match(expected, signature):
            raise SignatureError("Invalid token signature")

        payload = deserialize_payload(payload_bytes, payload_type)
        if read_expiration(payload) < _now():
            raise ExpiredError("Token has expired")
    except TokenError as e:
        logger.debug("Token rejected: %s", e.code)
        raise

    return payload
