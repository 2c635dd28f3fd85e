"""
Main FastAPI application entry point.

Builds the relay application: trace middleware, optional CORS, global
exception handlers, the /api routers, the browser client's index page and a
health check.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from botrelay.core.config import Settings, get_settings
from botrelay.core.container import (
    create_registration_store,
    create_upstream_client,
    get_logger,
)
from botrelay.presentation.api import api_router
from botrelay.presentation.api.errors import register_exception_handlers
from botrelay.presentation.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Logs the effective configuration at startup. A missing API token is
    only a warning here; every upstream-backed endpoint reports it as a
    configuration error.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    settings: Settings = app.state.settings
    logger = get_logger()

    logger.info(
        "relay_started",
        port=settings.port,
        environment=settings.environment.value,
        upstream=settings.upstream_api_base_url,
        auth_scheme=settings.upstream_auth_scheme.value,
        allowed_categories=len(settings.allowed_categories),
        started_at=datetime.now(UTC).isoformat(),
    )
    if settings.api_token is None:
        logger.warning("api_token_not_configured")
    if not settings.allowed_categories:
        logger.warning("allowed_categories_empty")

    yield

    logger.info("relay_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached process settings.
            Every app-scoped dependency (upstream client, retry policy,
            allowed categories, public prefix) is built from them.

    Returns:
        Configured FastAPI instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Relay between the browser client and the FNLB bot API",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registration_store = create_registration_store()
    app.state.upstream_client = create_upstream_client(settings)

    app.add_middleware(TraceMiddleware)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_origins),
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(api_router)

    index_file = settings.static_dir / "index.html" if settings.static_dir else None

    @app.get("/", include_in_schema=False, response_model=None)
    async def root() -> FileResponse | JSONResponse:
        """Serve the browser client, or a status banner when none is configured."""
        if index_file is not None and index_file.is_file():
            return FileResponse(index_file)
        return JSONResponse(
            content={
                "message": settings.app_name,
                "status": "operational",
                "version": settings.app_version,
            }
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint for monitoring and load balancers."""
        return {"status": "healthy"}

    return app


app = create_app()
