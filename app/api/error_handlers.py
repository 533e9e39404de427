import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.exceptions import ServiceError
from app.schemas.common import ApiResponse

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, data=None) -> JSONResponse:
    body = ApiResponse.error(message, data).model_dump(mode="json")
    return JSONResponse(status_code=status_code, content=body)


def unexpected_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and render the generic 500 envelope."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=exc)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register the global handlers that render errors in the response envelope."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        """NotFoundError -> 404, ConflictError -> 409."""
        logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return _envelope(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        return _envelope(
            status.HTTP_400_BAD_REQUEST, "Invalid request data", jsonable_encoder(details)
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        return unexpected_error_response(request, exc)
