"""TokenService: the three token operations bound to one secret."""

from typing import Any

from sealtoken.codec import create_token, decode_token
from sealtoken.config import TokenConfig
from sealtoken.verifier import verify_token


class TokenService:
    """Creates and verifies tokens with a fixed secret.

    Holds no mutable state, so one instance can be shared across threads.

    Args:
        config: A TokenConfig, or the secret itself.

    Usage:
        tokens = TokenService("s3cr3t")
        token = tokens.create({"user_id": 42, "exp": expires_at})
        claims = tokens.verify(token)
    """

    def __init__(self, config: TokenConfig | str | bytes) -> None:
        if not isinstance(config, TokenConfig):
            config = TokenConfig(secret=config)
        self._config = config

    @property
    def config(self) -> TokenConfig:
        return self._config

    def create(self, payload: Any) -> str:
        """Create a signed token for ``payload``."""
        return create_token(payload, self._config.secret)

    def verify(self, token: str, payload_type: Any = None) -> Any:
        """Verify signature and expiration, then return the payload.

        Raises:
            TokenError: Any subclass; the token must be rejected.
        """
        return verify_token(self._config.secret, token, payload_type)

    def decode(self, token: str, payload_type: Any = None) -> Any:
        """Decode the payload without verification. The result is untrusted."""
        return decode_token(token, payload_type)
