"""
FastAPI application factory.

* Registers routes for calculations and admin.
* Applies rate-limiting (slowapi).
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from src.api.middleware import limiter
from src.api.routes import admin, calculations
from src.infrastructure.database import engine

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Dispose of the connection pool on shutdown."""
    logger.info("Movement analyzer API starting")
    yield
    await engine.dispose()
    logger.info("Movement analyzer API stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Supply-Chain Movement Analyzer API",
        description=(
            "Classifies plant -> warehouse -> city movements as forward or "
            "backward from the interior angle of the spherical triangle at "
            "the warehouse.  Supports single analyses, CSV batch uploads, "
            "per-user history and summary statistics."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Routers
    app.include_router(calculations.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")

    return app
