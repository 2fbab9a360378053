"""Token claims and the authenticated identity attached to a request."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried inside a session token (Value Object).

    `issued_at` and `expires_at` are filled in by the token service on
    issue and populated from the token on verify.
    """
    user_id: str
    email: str
    issued_at: datetime | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, produced by the token verifier dependency."""
    user_id: str
    email: str

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> 'Identity':
        return cls(user_id=claims.user_id, email=claims.email)
