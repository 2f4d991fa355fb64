"""
Application entry point.

Creates the FastAPI application and wires together:
- The in-memory product repository (seeded with the demo catalog)
- Routers (health and catalog)
- Error handlers (centralized domain-to-HTTP mapping)
- Request logging and rate limiting
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.infrastructure.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)
from app.interfaces.catalog.router import protected_router as catalog_write_router
from app.interfaces.catalog.router import router as catalog_router
from app.interfaces.health import root_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import RequestLoggingMiddleware, configure_logging
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: report startup state and configuration risks."""
    logger.info(
        "%s %s started with %d products",
        settings.project_name,
        settings.version,
        app.state.product_repository.count(),
    )
    if settings.uses_default_api_key:
        logger.warning(
            "API_KEY is not set; write endpoints accept the built-in default key. "
            "Set API_KEY before exposing this service."
        )
    yield
    logger.info("%s shutting down", settings.project_name)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware, and seeds a fresh
    product repository. This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- State ---
    app.state.product_repository = InMemoryProductRepository.with_fixtures()

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Middleware ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(root_router)
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(catalog_router, prefix=settings.api_prefix)
    app.include_router(catalog_write_router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=False)
