"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from userhub.infrastructure.persistence.sqlalchemy.models import Base
from userhub.presentation.api.dependencies import get_engine, get_event_publisher
from userhub.presentation.api.exception_handlers import setup_exception_handlers
from userhub.presentation.api.routers import auth_router, users_router
from userhub.presentation.api.schemas import HealthResponse
from userhub_auth.persistence.sqlalchemy import AuthBase
from userhub_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the userhub packages with:
    - Console output with timestamps and module names
    - Configurable log level (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("userhub").setLevel(log_level)
    logging.getLogger("userhub_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    for name in ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite", "amqp", "kombu"):
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

# API version info
API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Login, logout and the authenticated profile.

- Passwords are hashed with bcrypt
- Access tokens are HS256 JWTs sent as `Authorization: Bearer <token>`
- Logout revokes the presented token
""",
    },
    {
        "name": "Users",
        "description": """User management (requires a bearer token).

Responses use the envelope
`{success, message?, data?, errors?, meta?}`; lists carry
`meta = {page, per_page}`.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting UserHub API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    logger.info("Shutting down UserHub API...")
    await get_event_publisher().close()
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Create missing tables (users and revoked tokens)."""
    logger.info("Initializing database schema...")
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            await conn.run_sync(AuthBase.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    logger.info("Database schema initialized successfully")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(auth_router, tags=["Authentication"])
    v1_router.include_router(users_router, prefix="/users", tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="User registration, authentication and management.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app, debug=settings.api_debug)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (unversioned for load balancers)."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app


# Application instance for uvicorn
app = create_app()
