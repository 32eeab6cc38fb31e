"""Token errors. Every failure is final for the call and means "reject the token"."""


class TokenError(Exception):
    """Base class for all token failures."""

    code = "token_invalid"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class FormatError(TokenError):
    """Token does not split into exactly two non-empty segments."""

    code = "token_malformed"


class EncodingError(TokenError):
    """A token segment is not canonical unpadded base64url."""

    code = "token_encoding_invalid"


class SignatureError(TokenError):
    """Recomputed signature does not match the one carried by the token."""

    code = "token_signature_invalid"


class ExpiredError(TokenError):
    """Payload expiration lies in the past."""

    code = "token_expired"


class SerializationError(TokenError):
    """Payload could not be encoded."""

    code = "payload_unserializable"


class DeserializationError(TokenError):
    """Payload bytes do not match the expected structure."""

    code = "payload_invalid"


class TokenKeyError(TokenError):
    """Secret was rejected by the MAC construction."""

    code = "secret_invalid"
