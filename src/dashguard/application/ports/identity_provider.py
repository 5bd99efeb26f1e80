"""Identity provider port - resolves bearer tokens issued elsewhere."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Identity:
    """Authenticated principal from the session layer."""

    subject: str
    username: str | None = None
    email: str | None = None


class IdentityProvider(Protocol):
    """Port for validating tokens. Returns None for invalid or inactive tokens."""

    def decode_token(self, token: str) -> Identity | None: ...
