"""Request validation for the auth endpoints.

Bodies are validated by FastAPI before a handler runs, so a rejected
request never reaches the store or the password hasher. Failures are
rendered as 400 by api/errors.py.
"""

from pydantic import EmailStr, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from api.models import CamelModel
from utils.settings import PASSWORD_MIN_LENGTH

# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_BYTES = 72


class SignupRequest(CamelModel):
    """Request model for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @field_validator('password')
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode('utf-8')) > PASSWORD_MAX_BYTES:
            raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes")
        if '\x00' in v:
            raise ValueError("Password must not contain NUL characters")
        return v


class LoginRequest(CamelModel):
    """Request model for user login."""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Apply the same normalization EmailStr applied at signup.

        EmailStr strips whitespace, reduces "Name <addr>" to the bare address
        and lowercases the domain. Anything that does not parse is passed
        through and simply won't match a stored account.
        """
        try:
            return validate_email(v)[1]
        except PydanticCustomError:
            return v


def describe_validation_errors(errors: list[dict]) -> str:
    """Turn pydantic error dicts into one readable message.

    Example: "email: value is not a valid email address; password: String
    should have at least 6 characters"
    """
    if any(err.get("type") == "json_invalid" for err in errors):
        return "Invalid JSON in request body"

    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc)
        msg = err.get("msg", "Invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid request"
