"""Token codec: payload serialization, base64url segments, creation and unverified decoding.

Payloads are dumped to JSON-compatible values with a pydantic ``TypeAdapter``
and packed as MessagePack. The token is the two segments joined by ``.``.
"""

import logging
import re
from functools import lru_cache
from typing import Any

import msgpack
from jwt.utils import base64url_decode, base64url_encode
from pydantic import TypeAdapter, ValidationError

from sealtoken.errors import DeserializationError, EncodingError, FormatError, SerializationError, TokenError
from sealtoken.signer import sign

logger = logging.getLogger("sealtoken.codec")

SEPARATOR = "."

_SEGMENT_RE = re.compile(r"[A-Za-z0-9_-]+")


@lru_cache(maxsize=256)
def _adapter(payload_type: Any) -> TypeAdapter:
    return TypeAdapter(payload_type)


# ---------------------------------------------------------------------------
# Segments
# ---------------------------------------------------------------------------


def encode_segment(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64."""
    return base64url_encode(data).decode("ascii")


def decode_segment(segment: str) -> bytes:
    """Decode one unpadded base64url segment.

    Only canonical encodings are accepted: the URL-safe alphabet, no padding,
    and unused trailing bits set to zero, so any altered character is either
    rejected here or changes the decoded bytes.

    Raises:
        EncodingError: If the segment is not canonical base64url.
    """
    if not _SEGMENT_RE.fullmatch(segment) or len(segment) % 4 == 1:
        raise EncodingError("Invalid base64url encoding")
    data = base64url_decode(segment)
    if encode_segment(data) != segment:
        raise EncodingError("Non-canonical base64url encoding")
    return data


def split_token(token: str) -> tuple[str, str]:
    """Split a token into its payload and signature segments.

    Raises:
        FormatError: Unless the token has exactly two non-empty segments.
    """
    if not isinstance(token, str):
        raise FormatError("Token must be a string")
    parts = token.split(SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise FormatError("Invalid token format")
    return parts[0], parts[1]


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


def serialize_payload(payload: Any) -> bytes:
    """Serialize a payload to MessagePack bytes.

    Raises:
        SerializationError: If pydantic cannot dump the payload or MessagePack
            cannot pack the result.
    """
    try:
        data = _adapter(type(payload)).dump_python(payload, mode="json")
        return msgpack.packb(data, use_bin_type=True)
    except (TypeError, ValueError, OverflowError) as e:
        raise SerializationError(f"Payload cannot be serialized: {e}") from e


def deserialize_payload(payload_bytes: bytes, payload_type: Any = None) -> Any:
    """Deserialize MessagePack bytes, optionally validating into ``payload_type``.

    With no ``payload_type`` the unpacked value is returned as is.

    Raises:
        DeserializationError: If the bytes are not a single MessagePack value
            or do not validate against ``payload_type``.
    """
    try:
        data = msgpack.unpackb(payload_bytes, raw=False)
    except (msgpack.UnpackException, ValueError, TypeError) as e:
        raise DeserializationError(f"Payload is not valid MessagePack: {e}") from e

    if payload_type is None:
        return data

    try:
        return _adapter(payload_type).validate_python(data)
    except ValidationError as e:
        raise DeserializationError(
            f"Payload does not match {getattr(payload_type, '__name__', payload_type)}: "
            f"{e.error_count()} validation error(s)"
        ) from e


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------


def create_token(payload: Any, secret: str | bytes) -> str:
    """Create a signed token for ``payload``.

    Args:
        payload: Any value pydantic can serialize (mapping, dataclass, model...).
        secret: HMAC key, text or bytes.

    Returns:
        ``<base64url payload>.<base64url signature>``

    Raises:
        SerializationError: If the payload cannot be encoded.
        TokenKeyError: If the secret is rejected.
    """
    payload_bytes = serialize_payload(payload)
    signature = sign(secret, payload_bytes)
    return f"{encode_segment(payload_bytes)}{SEPARATOR}{encode_segment(signature)}"


def decode_token(token: str, payload_type: Any = None) -> Any:
    """Decode a token's payload WITHOUT checking its signature or expiration.

    The result is untrusted. Use it only for hints such as choosing which
    secret to verify with, never as an authentication decision.

    Raises:
        FormatError: If the token is not two non-empty segments.
        EncodingError: If the payload segment is not valid base64url.
        DeserializationError: If the payload does not match ``payload_type``.
    """
    try:
        payload_segment, _ = split_token(token)
        return deserialize_payload(decode_segment(payload_segment), payload_type)
    except TokenError as e:
        logger.debug("Token decoding failed: %s", e.code)
        raise
