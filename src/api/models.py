"""Pydantic models for API request/response."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.model.user import User


class CamelModel(BaseModel):
    """Fields are snake_case in Python and camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuickBooksStatus(CamelModel):
    connected: bool = False


class UserResponse(CamelModel):
    """Outward view of a user. Has no password field by construction."""
    id: str
    email: str
    name: str = ""
    first_name: str | None = None
    last_name: str | None = None
    quickbooks: QuickBooksStatus = Field(default_factory=QuickBooksStatus)

    @classmethod
    def from_domain(cls, user: User) -> 'UserResponse':
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            first_name=user.first_name,
            last_name=user.last_name,
            quickbooks=QuickBooksStatus(connected=user.quickbooks.connected),
        )


class AuthResponse(BaseModel):
    """Response model for register and login."""
    user: UserResponse
    token: str


class ProfileResponse(BaseModel):
    """Response model for profile and me."""
    user: UserResponse


class LogoutResponse(BaseModel):
    success: bool = True


class ErrorBody(BaseModel):
    message: str
    status: int


class ErrorResponse(BaseModel):
    """Shape of every error response."""
    error: ErrorBody
