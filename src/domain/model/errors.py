"""Domain-level exceptions.

Services raise these errors to express business rule violations.
The API layer maps them to HTTP status codes in one place (api/errors.py).
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class NotFoundError(DomainError):
    """Requested entity does not exist."""


class DuplicateError(DomainError):
    """Entity with the same unique key already exists."""


class ConflictError(DuplicateError):
    """Account with the same email is already registered."""


class ValidationError(DomainError):
    """Input violates a business validation rule.

    Raised by the service layer. Malformed request bodies are rejected
    earlier by FastAPI as RequestValidationError; both answer 400.
    """


class InvalidCredentialsError(DomainError):
    """Email or password is wrong. Deliberately does not say which."""


class UnauthorizedError(DomainError):
    """Request lacks a valid bearer token."""


class InvalidTokenError(DomainError):
    """Token is malformed, expired, or not signed by us."""


class ConfigError(DomainError):
    """Fatal misconfiguration, e.g. missing signing secret."""


class RepositoryError(DomainError):
    """Storage backend failed for a reason other than a business rule."""


class InternalError(DomainError):
    """Unexpected failure. The message is safe to show to callers."""
