"""FastAPI application entry point.

Run with ``uvicorn src.main:create_app --factory``.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import articles, comments, health, profiles, users
from src.api.error_handlers import register_error_handlers
from src.config import Settings
from src.database import create_db_engine, create_session_factory
from src.middleware import RequestLoggingMiddleware
from src.migrator import apply_migrations
from src.services.auth import TokenService, create_password_context

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """Send application logs to stderr at the configured level."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("src").setLevel(level.upper())
    logging.getLogger("conduit").setLevel(level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Apply pending migrations on startup and release the engine on shutdown."""
    settings: Settings = app.state.settings
    apply_migrations(app.state.engine, settings.migrations_dir)
    logger.info(f"Conduit API ready (environment={settings.environment})")
    yield
    app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from explicit settings."""
    settings = settings or Settings()
    configure_logging(settings.log_level)

    # Interactive docs only in development
    docs_enabled = settings.is_development
    app = FastAPI(
        title="Conduit API",
        description="RealWorld blogging platform backend",
        version=health.VERSION,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    engine = create_db_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.token_service = TokenService.from_settings(settings)
    app.state.pwd_context = create_password_context(settings.bcrypt_rounds)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "X-Requested-With"],
    )

    register_error_handlers(app)

    # Register routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(profiles.router)
    app.include_router(articles.router)
    app.include_router(comments.router)

    return app
