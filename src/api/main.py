"""FastAPI application entry point."""

import asyncio
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Must run before load_settings() reads the environment
load_dotenv()

# Allow `python src/api/main.py` without installing the package
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import register_exception_handlers
from api.routes import auth, customers, health, invoices, quickbooks
from adapter.mongodb.connection import close_mongodb_client, create_mongodb_client
from adapter.mongodb.indexes import ensure_all_indexes
from adapter.security.bcrypt_hasher import BcryptPasswordHasher
from adapter.security.jwt_token_service import JWTTokenService
from utils.logging import setup_structured_logging
from utils.settings import Settings, load_settings
from utils.supervisor import install_exception_hooks, install_loop_exception_handler

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "invoicer-api"


def _read_version() -> str:
    """Installed distribution version, or pyproject.toml for a source checkout."""
    try:
        return package_version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass
    pyproject = _src_path.parent / "pyproject.toml"
    if not pyproject.is_file():
        return "0.0.0"
    with open(pyproject, "rb") as f:
        return tomllib.load(f)["project"]["version"]


VERSION = _read_version()

SERVICE_NAME = "Invoicer API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: own the MongoDB client for the app's lifetime."""
    settings: Settings = app.state.settings
    install_exception_hooks(settings.environment)
    install_loop_exception_handler(asyncio.get_running_loop())

    client = create_mongodb_client(settings.mongo_url)
    app.state.mongo_client = client
    if client:
        if ensure_all_indexes(client[settings.database_name]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.error("Failed to create some MongoDB indexes; email uniqueness may not be enforced")
    else:
        logger.warning("MongoDB unavailable, store-backed routes will answer 503")

    yield  # App runs here

    app.state.mongo_client = None
    close_mongodb_client(client)


def _configure_cors(app: FastAPI, cors_origins_env: str) -> None:
    # Browsers refuse credentials with a wildcard origin
    if cors_origins_env == "*":
        cors_origins = ["*"]
        allow_credentials = False
        logger.warning(
            "CORS configured with wildcard origin ('*'). "
            "For production, set CORS_ORIGINS to specific domains (e.g., 'https://app.example.com')"
        )
    else:
        cors_origins = [origin.strip() for origin in cors_origins_env.split(",") if origin.strip()]
        allow_credentials = True
        logger.info(f"CORS configured with specific origins: {cors_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Raises:
        ConfigError: JWT_SECRET_KEY is not set. The app must not start
            without a signing secret.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title=SERVICE_NAME,
        description="User accounts and sessions for the invoicing frontend",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.mongo_client = None
    app.state.token_service = JWTTokenService(
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        expiration=timedelta(minutes=settings.jwt_expiration_minutes),
    )
    app.state.password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)

    _configure_cors(app, settings.cors_origins)
    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(invoices.router)
    app.include_router(customers.router)
    app.include_router(quickbooks.router)
    app.include_router(health.router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "running"
        }

    @app.get("/api/status")
    async def api_status():
        return {
            "status": "API is running",
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }

    return app


_settings = load_settings()
setup_structured_logging(_settings.log_level)
app = create_app(_settings)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=_settings.port,
        access_log=False  # Structured app logs already cover requests
    )
