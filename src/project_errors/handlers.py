"""FastAPI exception handlers that answer with JSON:API error documents.

This is the request boundary: application errors raised anywhere in a
handler are caught here exactly once and formatted with format_error().

    app = FastAPI()
    register_error_handlers(app)
"""

from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from project_errors.config import settings
from project_errors.exceptions import (
    BadRequestError,
    InternalError,
    ProjectError,
    ProjectMultiError,
)
from project_errors.formatting import ErrorResponseDescriptor, format_error
from project_errors.http import status_class
from project_errors.logging import get_logger
from project_errors.schemas.error import JsonApiErrorSource

logger = get_logger(__name__)

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JsonApiResponse(JSONResponse):
    """JSON response sent with the JSON:API media type."""

    media_type = JSONAPI_MEDIA_TYPE


def _to_response(formatted: ErrorResponseDescriptor) -> JSONResponse:
    return JsonApiResponse(status_code=formatted.status, content=formatted.data)


def error_response(error: ProjectError | ProjectMultiError) -> JSONResponse:
    """Write a formatted error's status and body onto a response."""
    return _to_response(format_error(error))


def _issue_source(location: Any) -> tuple[str, JsonApiErrorSource | None]:
    """Map a FastAPI issue ``loc`` to a readable field name and a JSON:API source.

    ("body", "items", 0, "price") -> "items.0.price", pointer "/items/0/price"
    ("query", "limit")            -> "limit", parameter "limit"
    ("header", "x-token")         -> "x-token", header "x-token"
    """
    if not isinstance(location, (tuple, list)) or not location:
        return (str(location) if location else "request"), None

    origin, path = location[0], [str(part) for part in location[1:]]
    field = ".".join(path) or str(origin)
    if origin == "body":
        return field, JsonApiErrorSource(pointer="/" + "/".join(path) if path else "")
    if origin in ("query", "path", "cookie") and path:
        return field, JsonApiErrorSource(parameter=path[0])
    if origin == "header" and path:
        return field, JsonApiErrorSource(header=path[0])
    return ".".join(str(part) for part in location), None


def _from_validation_error(exc: RequestValidationError) -> ProjectMultiError:
    """One Bad Request entry per validation issue, in the order FastAPI reports them."""
    errors = []
    for issue in exc.errors():
        field, source = _issue_source(issue.get("loc", ()))
        errors.append(
            BadRequestError(f"{field}: {issue.get('msg', 'Invalid value')}", source=source)
        )
    return ProjectMultiError(errors)


def _from_http_exception(exc: StarletteHTTPException) -> ProjectError:
    try:
        title = HTTPStatus(exc.status_code).phrase
    except ValueError:
        title = None
    message = exc.detail if isinstance(exc.detail, str) else None
    return ProjectError(message, status=exc.status_code, title=title)


async def project_error_handler(
    request: Request, exc: ProjectError | ProjectMultiError
) -> JSONResponse:
    """Answer with the reconciled status and one entry per error.

    Client errors are logged at warning, everything else at error.
    """
    formatted = format_error(exc)
    log = logger.warning if status_class(formatted.status) == 4 else logger.error
    log(
        "project_error",
        status=formatted.status,
        error_count=len(formatted.data["errors"]),
        path=request.url.path,
        method=request.method,
    )
    return _to_response(formatted)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report FastAPI validation failures as a bundle of Bad Request errors."""
    return await project_error_handler(request, _from_validation_error(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Report framework HTTP errors (404 on unknown routes, 405, ...) in the same shape."""
    response = await project_error_handler(request, _from_http_exception(exc))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer unrecognized failures with a generic internal error.

    - Logs full exception with traceback (unless disabled in settings)
    - Returns the catalog internal error to the client (no stack traces leaked)
    """
    if settings.log_unhandled:
        logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return error_response(InternalError())


def register_error_handlers(app: FastAPI) -> None:
    """Attach the JSON:API error handlers to a FastAPI app."""
    app.add_exception_handler(ProjectError, project_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ProjectMultiError, project_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(
        RequestValidationError, request_validation_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(
        StarletteHTTPException, http_exception_handler  # type: ignore[arg-type]
    )
    app.add_exception_handler(Exception, unhandled_exception_handler)
