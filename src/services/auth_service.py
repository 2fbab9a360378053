"""Auth service — registration, login and profile business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that the API layer maps to HTTP status codes.
Store and hasher failures are logged here and surface as InternalError.
"""

import logging
from dataclasses import dataclass

from domain.model.errors import (
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from domain.model.identity import TokenClaims
from domain.model.user import User
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


@dataclass(frozen=True)
class AuthResult:
    """Authenticated user plus a freshly issued session token."""
    user: User
    token: str


def _issue_token(tokens: TokenService, user: User) -> str:
    return tokens.issue(TokenClaims(user_id=user.id, email=user.email))


def register(
    repo: UserRepository,
    hasher: PasswordHasher,
    tokens: TokenService,
    email: str,
    password: str,
    name: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
) -> AuthResult:
    """Register a new user and issue a session token.

    Input shape (email syntax, password length) is validated by the API
    layer. Callers that bypass it still cannot store an account without
    an email or a password.

    Raises:
        ValidationError: email or password is empty
        ConflictError: email already registered
        InternalError: store or hasher failure
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    try:
        if repo.get_by_email(email):
            raise ConflictError("User already exists with this email")

        password_hash = hasher.hash(password)
        user = repo.create(
            email=email,
            password_hash=password_hash,
            name=User.display_name(name, first_name, last_name),
            first_name=first_name,
            last_name=last_name,
        )
    except RepositoryError as e:
        logger.error("Registration failed in store", extra={"error": str(e)})
        raise InternalError("Error creating user") from e
    except ValueError as e:
        # bcrypt rejects some inputs (e.g. embedded NUL bytes)
        logger.error("Password hashing failed", extra={"error": str(e)})
        raise InternalError("Error creating user") from e

    logger.info("User registered", extra={"userId": user.id})
    return AuthResult(user=user, token=_issue_token(tokens, user))


def authenticate(
    repo: UserRepository,
    hasher: PasswordHasher,
    tokens: TokenService,
    email: str,
    password: str,
) -> AuthResult:
    """Authenticate a user by email and password.

    Unknown email and wrong password raise the same error with the same
    message, so a caller cannot tell which one failed.

    Raises:
        InvalidCredentialsError: unknown email or wrong password
        InternalError: store failure
    """
    try:
        user = repo.get_by_email(email)
    except RepositoryError as e:
        logger.error("Login lookup failed in store", extra={"error": str(e)})
        raise InternalError("Error logging in") from e

    if not user or not hasher.verify(password, user.password_hash or ""):
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

    # Best effort: a failed audit update never fails the login
    repo.update_last_login(user.id)

    logger.info("User logged in", extra={"userId": user.id})
    return AuthResult(user=user, token=_issue_token(tokens, user))


def get_profile(repo: UserRepository, user_id: str) -> User:
    """Load the profile of an authenticated user.

    Raises:
        NotFoundError: the token is valid but the account no longer exists
        InternalError: store failure
    """
    try:
        user = repo.get_by_id(user_id)
    except RepositoryError as e:
        logger.error("Profile lookup failed in store", extra={"userId": user_id, "error": str(e)})
        raise InternalError("Error fetching profile") from e

    if not user:
        raise NotFoundError("User not found")
    return user
