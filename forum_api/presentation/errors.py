"""
Domain error -> HTTP response mapping.

Routers stay free of try/except: every domain exception bubbles up to the
handlers registered here.

    DomainValidationError (+ subclasses)  → 400
    ConflictError                         → 400
    AuthenticationError                   → 401
    AccessDeniedError                     → 403
    EntityNotFoundError                   → 404
    anything else                         → 500
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from forum_api.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    ConflictError,
    DomainValidationError,
    EntityNotFoundError,
)

logger = logging.getLogger(__name__)


class DomainErrorTranslator:
    """Turns validation codes like ``ADD_THREAD.NOT_CONTAIN_NEEDED_PROPERTY`` into client messages."""

    _messages: dict[str, str] = {
        "REGISTER_USER.NOT_CONTAIN_NEEDED_PROPERTY": "cannot create a new user because required properties are missing",
        "REGISTER_USER.NOT_MEET_DATA_TYPE_SPECIFICATION": "cannot create a new user because property types do not match",
        "REGISTER_USER.USERNAME_LIMIT_CHAR": "cannot create a new user because the username exceeds 50 characters",
        "REGISTER_USER.USERNAME_CONTAIN_RESTRICTED_CHARACTER": "cannot create a new user because the username contains restricted characters",
        "USER_LOGIN.NOT_CONTAIN_NEEDED_PROPERTY": "username and password are required",
        "USER_LOGIN.NOT_MEET_DATA_TYPE_SPECIFICATION": "username and password must be strings",
        "REFRESH_AUTHENTICATION.NOT_CONTAIN_NEEDED_PROPERTY": "refresh token is required",
        "REFRESH_AUTHENTICATION.NOT_MEET_DATA_TYPE_SPECIFICATION": "refresh token must be a string",
        "DELETE_AUTHENTICATION.NOT_CONTAIN_NEEDED_PROPERTY": "refresh token is required",
        "DELETE_AUTHENTICATION.NOT_MEET_DATA_TYPE_SPECIFICATION": "refresh token must be a string",
        "REFRESH_TOKEN.INVALID": "refresh token is invalid",
        "REFRESH_TOKEN.NOT_FOUND": "refresh token not found in database",
        "ADD_THREAD.NOT_CONTAIN_NEEDED_PROPERTY": "cannot create a new thread because required properties are missing",
        "ADD_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION": "cannot create a new thread because property types do not match",
        "ADD_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY": "cannot create a new comment because required properties are missing",
        "ADD_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION": "cannot create a new comment because property types do not match",
        "DELETE_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY": "cannot delete the comment because required properties are missing",
        "DELETE_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION": "cannot delete the comment because property types do not match",
        "ADD_REPLY.NOT_CONTAIN_NEEDED_PROPERTY": "cannot create a new reply because required properties are missing",
        "ADD_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION": "cannot create a new reply because property types do not match",
        "DELETE_REPLY.NOT_CONTAIN_NEEDED_PROPERTY": "cannot delete the reply because required properties are missing",
        "DELETE_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION": "cannot delete the reply because property types do not match",
    }

    @classmethod
    def translate(cls, error: DomainValidationError) -> str:
        return cls._messages.get(error.code, error.message)


def _fail(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "fail", "message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainValidationError)
    async def validation_error_handler(request: Request, exc: DomainValidationError):
        logger.info(f"[VALIDATION ERROR] {exc.code}")
        return _fail(status.HTTP_400_BAD_REQUEST, DomainErrorTranslator.translate(exc))

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        return _fail(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return _fail(status.HTTP_401_UNAUTHORIZED, str(exc))

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        return _fail(status.HTTP_403_FORBIDDEN, str(exc))

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return _fail(status.HTTP_404_NOT_FOUND, str(exc))

    # Malformed bodies (e.g. a JSON array instead of an object)
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"[REQUEST VALIDATION ERROR] {exc.errors()}")
        return _fail(status.HTTP_400_BAD_REQUEST, "Request body is not valid")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "fail", "message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": "Internal server error"},
        )
