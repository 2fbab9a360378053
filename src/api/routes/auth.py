"""Authentication routes (register, login, profile, me, logout)."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from api.dependencies import get_password_hasher, get_token_service, get_user_repo
from api.models import AuthResponse, LogoutResponse, ProfileResponse, UserResponse
from api.security import get_current_identity
from api.validation import LoginRequest, SignupRequest
from domain.model.identity import Identity
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository
from services import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


# Handlers are sync so pymongo and bcrypt run in the threadpool


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: SignupRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """Register a new user.

    Returns:
        The created user (without password hash) and a JWT

    Raises:
        ConflictError: 400 if the email is already registered
    """
    result = auth_service.register(
        repo, hasher, tokens,
        email=request.email,
        password=request.password,
        name=request.name,
        first_name=request.first_name,
        last_name=request.last_name,
    )
    return AuthResponse(user=UserResponse.from_domain(result.user), token=result.token)


@router.post("/login", response_model=AuthResponse)
def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    """Log a user in and return a JWT.

    Raises:
        InvalidCredentialsError: 401, same body for unknown email and wrong password
    """
    result = auth_service.authenticate(
        repo, hasher, tokens, email=request.email, password=request.password,
    )
    return AuthResponse(user=UserResponse.from_domain(result.user), token=result.token)


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    identity: Identity = Depends(get_current_identity),
    repo: UserRepository = Depends(get_user_repo),
):
    """Get the profile of the authenticated user."""
    user = auth_service.get_profile(repo, identity.user_id)
    return ProfileResponse(user=UserResponse.from_domain(user))


@router.get("/me", response_model=ProfileResponse)
def get_me(
    identity: Identity = Depends(get_current_identity),
    repo: UserRepository = Depends(get_user_repo),
):
    """Get the authenticated user. Same payload as /profile."""
    user = auth_service.get_profile(repo, identity.user_id)
    return ProfileResponse(user=UserResponse.from_domain(user))


@router.post("/logout", response_model=LogoutResponse)
async def logout():
    """Log out. Tokens are stateless; the client discards its copy."""
    return LogoutResponse(success=True)


@router.get("/health")
async def auth_health():
    return {
        "status": "ok",
        "message": "Authentication service is up and running",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
    }
