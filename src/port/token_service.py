from typing import Protocol
from domain.model.identity import TokenClaims


class TokenService(Protocol):
    """Issues and verifies signed, time-limited session tokens."""
    def issue(self, claims: TokenClaims) -> str:
        """Return a signed token carrying `claims` plus iat/exp."""
        ...

    def verify(self, token: str) -> TokenClaims:
        """Return the claims of a valid token. Raise InvalidTokenError otherwise."""
        ...
