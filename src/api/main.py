"""FastAPI application entry point."""

import os
import logging
import tomllib
from importlib import metadata
from pathlib import Path
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars (like BCRYPT_ROUNDS)
load_dotenv()

from api.routes import analytics, auth, health, products, users
from adapter.memory.product_repository import InMemoryProductRepository
from adapter.memory.seed import SEED_PASSWORD, seed_repositories
from adapter.memory.user_repository import InMemoryUserRepository
from services.auth_service import hash_password
from utils.logging import setup_structured_logging

# Set up structured JSON logging
setup_structured_logging(os.getenv("LOG_LEVEL", "INFO"))

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "adminpro-api"
SERVICE_NAME = "AdminPro API"
API_PREFIX = "/api"


def read_version(pyproject: Path = Path(__file__).parent.parent.parent / "pyproject.toml") -> str:
    """Version from pyproject.toml in a source checkout, else from installed package metadata."""
    try:
        with open(pyproject, "rb") as f:
            return tomllib.load(f)["project"]["version"]
    except FileNotFoundError:
        return metadata.version(DISTRIBUTION_NAME)


VERSION = read_version()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


def _configure_cors(app: FastAPI) -> None:
    # If CORS_ORIGINS="*": allow_credentials must be False (browsers don't support credentials with wildcard)
    cors_origins_env = os.getenv("CORS_ORIGINS", "*")
    if cors_origins_env == "*":
        cors_origins = ["*"]
        allow_credentials = False
    else:
        cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
        allow_credentials = True
        logger.info(f"CORS configured with specific origins: {cors_origins}")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Invalid input", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", extra={"path": request.url.path, "method": request.method})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )


def create_app(seed: bool | None = None) -> FastAPI:
    """Build an application with its own, freshly constructed repositories.

    Args:
        seed: Load the bootstrap dataset. Defaults to the SEED_DATA env var (true).
    """
    if seed is None:
        seed = _env_flag("SEED_DATA", "true")

    app = FastAPI(
        title=SERVICE_NAME,
        description="Admin dashboard API - users, products and analytics over an in-memory store",
        version=VERSION,
    )

    user_repo = InMemoryUserRepository()
    product_repo = InMemoryProductRepository()
    if seed:
        seed_repositories(user_repo, product_repo, hash_password(SEED_PASSWORD))
    app.state.user_repo = user_repo
    app.state.product_repo = product_repo

    _configure_cors(app)
    _register_error_handlers(app)

    # Register routes
    for module in (auth, users, products, analytics, health):
        app.include_router(module.router, prefix=API_PREFIX)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": SERVICE_NAME,
            "version": VERSION,
            "status": "running"
        }

    return app


app = create_app()
