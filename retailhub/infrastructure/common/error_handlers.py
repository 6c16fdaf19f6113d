"""Exception handlers rendering every failure as the response envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from retailhub.exceptions import ErrorType, RetailhubError
from retailhub.infrastructure.common.schemas import ApiResponse, ErrorItem

logger = logging.getLogger(__name__)

# Location prefixes pydantic puts in front of the offending field
_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})
_REQUIRED_ERROR_TYPES = frozenset({"missing", "value_error.missing"})


def _envelope(status_code: int, message: str, errors: list[ErrorItem]) -> JSONResponse:
    body = ApiResponse.failure(message, errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def validation_error_items(exc: RequestValidationError) -> list[ErrorItem]:
    """One ErrorItem per violated constraint, located without the request part prefix."""
    items: list[ErrorItem] = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        if len(location) > 1 and location[0] in _LOCATION_PREFIXES:
            location = location[1:]
        error_type: ErrorType = (
            "required" if error.get("type") in _REQUIRED_ERROR_TYPES else "invalid"
        )
        items.append(
            ErrorItem(
                field=".".join(location) or "request",
                message=error.get("msg", "Invalid value"),
                type=error_type,
            )
        )
    return items


async def retailhub_error_handler(request: Request, exc: RetailhubError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    errors = [ErrorItem(**item) for item in exc.to_error_items()]
    return _envelope(exc.status_code, exc.message, errors)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    items = validation_error_items(exc)
    logger.info(f"{request.method} {request.url.path} failed validation: {len(items)} error(s)")
    return _envelope(status.HTTP_400_BAD_REQUEST, "Validation failed", items)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    error_type: ErrorType
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        error_type = "not_found"
    elif exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        error_type = "internal_error"
    else:
        error_type = "invalid"
    message = str(exc.detail)
    return _envelope(
        exc.status_code, message, [ErrorItem(field="request", message=message, type=error_type)]
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!s}", exc_info=exc)
    message = "An unexpected error occurred. Please try again later."
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        message,
        [ErrorItem(field="server", message=message, type="internal_error")],
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-rendering handlers on ``app``."""
    app.add_exception_handler(RetailhubError, retailhub_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError,
        request_validation_error_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        StarletteHTTPException,
        http_exception_handler,  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)
