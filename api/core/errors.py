"""
Error taxonomy and the single place errors become HTTP responses.

Services raise `ApiError` subclasses as soon as they detect bad input.
Database errors are not caught in repositories; they propagate up and are
classified here. Every error response body is `{"msg": "..."}`.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_msg = "Internal server error"

    def __init__(self, msg: str | None = None) -> None:
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Bad request"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Path") -> None:
        self.resource = resource
        super().__init__(f"{resource} not found")


class PageNotFound(NotFound):
    def __init__(self) -> None:
        super().__init__("Page")


class MethodNotAllowed(ApiError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    default_msg = "Method not allowed"


class InternalError(ApiError):
    pass


# Constraints whose violation means a resource named in the URL is gone.
CONSTRAINT_RESOURCES: dict[str, str] = {
    "comments_article_id_fkey": "Article",
}

# invalid_text_representation, not_null_violation, foreign_key_violation,
# unique_violation
BAD_REQUEST_SQLSTATES = frozenset({"22P02", "23502", "23503", "23505"})


def classify(exc: BaseException) -> tuple[int, str]:
    """
    Map any caught error to `(status_code, msg)`.

    Order matters: explicit application errors win over database error
    inspection, and anything unrecognised is a logged 500.
    """
    if isinstance(exc, ApiError):
        if isinstance(exc, InternalError):
            logger.error("Internal error: %s", exc.msg, exc_info=exc)
        else:
            logger.debug("Client error %d: %s", exc.status_code, exc.msg)
        return exc.status_code, exc.msg

    if isinstance(exc, asyncpg.PostgresError):
        constraint = getattr(exc, "constraint_name", None) or ""
        resource = CONSTRAINT_RESOURCES.get(constraint)
        if resource is not None:
            logger.debug("Constraint %s violated, reporting missing %s", constraint, resource)
            return status.HTTP_404_NOT_FOUND, f"{resource} not found"

        if exc.sqlstate in BAD_REQUEST_SQLSTATES:
            logger.debug("Database rejected input (%s): %s", exc.sqlstate, exc)
            return status.HTTP_400_BAD_REQUEST, BadRequest.default_msg

    # asyncpg encodes arguments client-side; a value the column type cannot
    # hold fails with the bare DataError instead of 22P02. Its server-side
    # subclasses (22003, 22012, ...) are not client mistakes.
    if type(exc) is asyncpg.exceptions.DataError:
        logger.debug("Query argument rejected: %s", exc)
        return status.HTTP_400_BAD_REQUEST, BadRequest.default_msg

    logger.error("Unhandled error", exc_info=exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.default_msg


def _to_api_error(exc: Exception) -> Exception:
    if isinstance(exc, RequestValidationError):
        return BadRequest()
    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return NotFound("Path")
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return MethodNotAllowed()
    return exc


async def error_handler(request: Request, exc: Exception) -> JSONResponse:
    headers = getattr(exc, "headers", None)
    translated = _to_api_error(exc)
    if isinstance(translated, StarletteHTTPException):
        # Other HTTP statuses raised by the framework keep their own detail.
        return JSONResponse(
            status_code=translated.status_code,
            content={"msg": str(translated.detail)},
            headers=headers,
        )

    status_code, msg = classify(translated)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed", request.method, request.url.path)
    return JSONResponse(status_code=status_code, content={"msg": msg}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, error_handler)
    app.add_exception_handler(RequestValidationError, error_handler)
    app.add_exception_handler(StarletteHTTPException, error_handler)
    app.add_exception_handler(asyncpg.PostgresError, error_handler)
    app.add_exception_handler(asyncpg.InterfaceError, error_handler)
    app.add_exception_handler(Exception, error_handler)
