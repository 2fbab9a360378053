"""Runtime configuration read from environment variables.

api/main.py loads `.env` with python-dotenv before anything calls
load_settings(), so values from the file and the process environment are
both visible here.
"""

import os
from dataclasses import dataclass

DEFAULT_JWT_EXPIRATION_MINUTES = 7 * 24 * 60
DEFAULT_BCRYPT_ROUNDS = 12
PASSWORD_MIN_LENGTH = 6


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Application settings. Build with load_settings()."""
    jwt_secret_key: str | None
    jwt_algorithm: str = "HS256"
    jwt_expiration_minutes: int = DEFAULT_JWT_EXPIRATION_MINUTES
    mongo_url: str | None = None
    database_name: str = "invoicer"
    bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS
    cors_origins: str = "*"
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8000

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


def load_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        jwt_secret_key=os.getenv("JWT_SECRET_KEY") or None,
        jwt_expiration_minutes=_int_env("JWT_EXPIRATION_MINUTES", DEFAULT_JWT_EXPIRATION_MINUTES),
        mongo_url=os.getenv("MONGO_URL") or None,
        database_name=os.getenv("MONGODB_DATABASE", "invoicer"),
        bcrypt_rounds=_int_env("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS),
        cors_origins=os.getenv("CORS_ORIGINS", "*"),
        environment=os.getenv("APP_ENV", "development"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=_int_env("PORT", 8000),
    )
