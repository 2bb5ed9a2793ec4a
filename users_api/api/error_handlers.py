# users_api/api/error_handlers.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.utils.logging import get_logger

logger = get_logger(__name__)

# pola, ktorych brak lub pusta wartosc daje komunikat o wymaganych polach
_REQUIRED_FIELDS = {"name", "email"}
_MISSING_TYPES = {"missing", "string_too_short"}


def register_error_handlers(app: FastAPI) -> None:
    """Wszystkie bledy wychodza jako text/plain."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
        return PlainTextResponse(
            validation_message(exc.errors()), status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        return PlainTextResponse(
            "Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def validation_message(errors) -> str:
    for err in errors:
        loc = err.get("loc", ())
        if loc and loc[-1] in _REQUIRED_FIELDS and err.get("type") in _MISSING_TYPES:
            return "Name and email are required"
    details = "; ".join(
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in errors
    )
    return f"Invalid request payload: {details}"
