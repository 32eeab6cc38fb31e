"""Test fixtures for sealtoken tests.

Everything is in-memory: tokens are created with a test secret and the
verifier clock is patched where the exact second matters.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime

import pytest
from pydantic import BaseModel

NOW = 1_700_000_000


@dataclass(frozen=True, slots=True)
class Claims:
    user_id: int
    exp: int
    roles: list[str] = field(default_factory=list)


@dataclass
class Lease:
    """Exposes its expiration through a method instead of a field."""

    holder: str
    expires_at: int

    def exp(self) -> int:
        return self.expires_at


class SessionClaims(BaseModel):
    sub: uuid.UUID
    email: str
    issued_at: datetime
    exp: int


@pytest.fixture
def secret():
    return "s3cr3t"


@pytest.fixture
def frozen_now(monkeypatch):
    """Pin the verifier clock to NOW."""
    monkeypatch.setattr("sealtoken.verifier._now", lambda: NOW)
    return NOW


@pytest.fixture
def future_exp():
    return 4_000_000_000


def flip_bit(token: str, index: int, bit: int) -> str:
    """Return ``token`` with one bit of the character at ``index`` flipped."""
    flipped = chr(ord(token[index]) ^ (1 << bit))
    return token[:index] + flipped + token[index + 1:]
