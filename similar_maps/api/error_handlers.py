"""API error handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from similar_maps.utils.exceptions import APIError, MapAnalysisError, ValidationError
from similar_maps.utils.logging import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register custom error handlers with the FastAPI app."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("validation_error", message=exc.message, field=exc.field)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "field": exc.field,
                "details": exc.details,
            },
        )

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
        logger.error(
            "api_error",
            message=exc.message,
            status_code=exc.status_code,
            error_code=exc.error_code,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.error_code,
                "message": exc.message,
                "details": exc.details,
            },
        )

    @app.exception_handler(MapAnalysisError)
    async def map_analysis_error_handler(
        request: Request, exc: MapAnalysisError
    ) -> JSONResponse:
        logger.error("map_analysis_error", message=exc.message)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_error",
                "message": exc.message,
                "details": exc.details,
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled_exception", error=str(exc))
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_error",
                "message": "An unexpected error occurred",
            },
        )
