"""Bearer-token verification shared by every protected route."""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from api.dependencies import get_token_service
from domain.model.errors import InvalidTokenError, UnauthorizedError
from domain.model.identity import Identity
from port.token_service import TokenService

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through our own 401 body
security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Verify the bearer token and return the caller's identity.

    Raises:
        UnauthorizedError: header missing, not a Bearer scheme, or the token
            does not verify
    """
    if not credentials:
        raise UnauthorizedError("Not authenticated")

    try:
        claims = tokens.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.debug("Rejected bearer token", extra={"reason": str(e)})
        raise UnauthorizedError("Invalid or expired token")

    return Identity.from_claims(claims)
