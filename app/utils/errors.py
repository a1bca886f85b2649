"""Exception handlers mapping failures onto the API's error responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.utils.logging_config import logger

INTERNAL_ERROR_DETAIL = "Internal Server Error"


def _field_name(loc: tuple) -> str:
    # ("body", "email") -> "email"; ("path", "comment_id") -> "comment_id"
    parts = [str(part) for part in loc if part not in ("body", "path", "query")]
    if parts:
        return ".".join(parts)
    return str(loc[-1]) if loc else ""


def _message(error: dict) -> str:
    ctx_error = error.get("ctx", {}).get("error")
    if isinstance(ctx_error, Exception):
        return str(ctx_error)
    return error["msg"]


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or missing input is a 400 with one entry per offending field."""
    errors = [
        {"field": _field_name(tuple(err["loc"])), "msg": _message(err)}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors}
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Not found, conflict and unauthorized responses carry an `error` message."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    logger.error(
        f"Database error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_DETAIL},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else unexpected is logged in full and reported as a bare 500."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
