"""sealtoken configuration."""

import os
from dataclasses import dataclass, field

from sealtoken.errors import TokenKeyError

SECRET_ENV_VAR = "SEALTOKEN_SECRET"


@dataclass(frozen=True, slots=True)
class TokenConfig:
    """Signing configuration. Pass to TokenService.

    Example:
        TokenConfig(secret="s3cr3t")
        TokenConfig.from_env()                  # reads SEALTOKEN_SECRET
    """

    secret: str | bytes = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.secret, (str, bytes)):
            raise TokenKeyError(f"Secret must be str or bytes, not {type(self.secret).__name__}")

    @classmethod
    def from_env(cls, var: str = SECRET_ENV_VAR) -> "TokenConfig":
        """Build a config from the secret stored in environment variable ``var``.

        Raises:
            TokenKeyError: If the variable is unset or empty.
        """
        secret = os.getenv(var)
        if not secret:
            raise TokenKeyError(f"Environment variable {var} is not set")
        return cls(secret=secret)
