"""sealtoken: compact HMAC-signed tokens with MessagePack payloads."""

__version__ = "0.1.0"

from sealtoken.codec import create_token, decode_token
from sealtoken.config import TokenConfig
from sealtoken.errors import (
    DeserializationError,
    EncodingError,
    ExpiredError,
    FormatError,
    SerializationError,
    SignatureError,
    TokenError,
    TokenKeyError,
)
from sealtoken.service import TokenService
from sealtoken.signer import sign
from sealtoken.verifier import Expirable, verify_token

__all__ = [
    "DeserializationError",
    "EncodingError",
    "Expirable",
    "ExpiredError",
    "FormatError",
    "SerializationError",
    "SignatureError",
    "TokenConfig",
    "TokenError",
    "TokenKeyError",
    "TokenService",
    "create_token",
    "decode_token",
    "sign",
    "verify_token",
]
