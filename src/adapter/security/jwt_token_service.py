"""JWT implementation of TokenService (python-jose, HS256)."""

import logging
from datetime import datetime, timedelta, timezone

from jose import jwt
from jose.exceptions import JOSEError

from domain.model.errors import ConfigError, InvalidTokenError
from domain.model.identity import TokenClaims

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_MINUTES = 7 * 24 * 60


class JWTTokenService:
    """Signs and verifies session tokens with a shared secret.

    Raises ConfigError at construction when no secret is configured, so a
    misconfigured app fails at startup instead of issuing weak tokens.
    """

    def __init__(
        self,
        secret_key: str | None,
        algorithm: str = JWT_ALGORITHM,
        expiration: timedelta = timedelta(minutes=JWT_EXPIRATION_MINUTES),
    ):
        if not secret_key:
            raise ConfigError(
                "JWT_SECRET_KEY environment variable is required. "
                "Generate a secure key with: openssl rand -hex 32"
            )
        if expiration <= timedelta(0):
            raise ConfigError("Token expiration must be positive")
        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expiration = expiration

    def issue(self, claims: TokenClaims) -> str:
        """Create a signed token for the given identity."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": claims.user_id,
            "email": claims.email,
            "iat": now,
            "exp": now + self.expiration,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Raises:
            InvalidTokenError: malformed, expired, wrong signature, missing
                subject, or signed with any algorithm other than ours
        """
        try:
            header = jwt.get_unverified_header(token)
        except JOSEError as e:
            logger.debug(f"JWT header unreadable: {e}")
            raise InvalidTokenError("Malformed token")

        # Reject alg=none and any asymmetric/other HMAC algorithm up front
        if header.get("alg") != self.algorithm:
            logger.debug("JWT algorithm mismatch", extra={"alg": header.get("alg")})
            raise InvalidTokenError("Unexpected token algorithm")

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
        except JOSEError as e:
            logger.debug(f"JWT verification failed: {e}")
            raise InvalidTokenError("Invalid or expired token")

        user_id = payload.get("sub")
        if not user_id:
            raise InvalidTokenError("Token has no subject")

        return TokenClaims(
            user_id=user_id,
            email=payload.get("email", ""),
            issued_at=_from_timestamp(payload.get("iat")),
            expires_at=_from_timestamp(payload.get("exp")),
        )


def _from_timestamp(value) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value, timezone.utc)
