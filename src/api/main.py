"""
HTTP application factory.

Run with `uvicorn src.api.main:create_app --factory` or `admin serve`.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.api.errors import register_exception_handlers
from src.api.routes import auth, cities, clients, logs, users
from src.app_shell.config import Settings, configure_logging, validate_ops_rules
from src.app_shell.context import ServiceContext
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    context: ServiceContext = app.state.context
    logger.info("Admin API started (store: %s)", context.settings.db_path)
    yield
    logger.info("Admin API stopped")


def warn_pending_migrations(settings: Settings) -> list[str]:
    """Log, without applying, migrations the store has not seen yet."""
    pending = SQLiteMigrator(settings.db_path).pending()
    if pending:
        logger.warning(
            "Store %s has %d pending migration(s): %s. Run `gusen-admin migrate`.",
            settings.db_path,
            len(pending),
            ", ".join(pending),
        )
    return pending


def create_app(
    settings: Settings | None = None,
    *,
    context: ServiceContext | None = None,
) -> FastAPI:
    """
    Build the application. Rules are loaded and validated here so a bad
    configuration fails before the server binds.
    """
    if context is None:
        settings = settings or Settings()
        configure_logging(settings.log_level)
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules, settings)
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        context = ServiceContext.create(settings, rules)
        logger.info("Rules loaded from %s", settings.rules_path)
        warn_pending_migrations(settings)

    app = FastAPI(
        title="Gusen Admin API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.context = context

    register_exception_handlers(app)

    app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(logs.router, prefix="/api/logs", tags=["Logs"])
    app.include_router(clients.router, prefix="/api/clients", tags=["Clients"])
    app.include_router(cities.router, prefix="/api/cities", tags=["Cities"])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.rules.ops.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "admin-api"}

    return app
