"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from similar_maps import __version__
from similar_maps.api.error_handlers import register_error_handlers
from similar_maps.api.middleware import setup_middleware
from similar_maps.api.routes import router
from similar_maps.config.settings import get_settings
from similar_maps.utils.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    logger = get_logger(__name__)

    setup_logging(
        log_level=settings.log_level,
        log_format="console" if settings.debug else settings.log_format,
    )

    logger.info(
        "application_starting",
        version=__version__,
        debug=settings.debug,
        max_batch_size=settings.max_batch_size,
    )

    yield

    logger.info("application_shutdown")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Similar Maps API",
        description=(
            "Finds exact and near-duplicate custom maps in a collection, ranks "
            "every version of a song and recommends the one to keep."
        ),
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    setup_middleware(app)
    register_error_handlers(app)
    app.include_router(router)

    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "similar_maps.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
