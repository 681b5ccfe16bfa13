"""Exception handler registration for FastAPI applications."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.responses import PlainTextResponse
from starlette.authentication import AuthenticationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from jsonapi_exceptions.core.errors import JsonApiError
from jsonapi_exceptions.core.errors import RequestError
from jsonapi_exceptions.core.errors import UnexpectedDocumentError
from jsonapi_exceptions.core.errors import ValidationFailedError
from jsonapi_exceptions.parser import ExceptionParser

logger = logging.getLogger(__name__)

HANDLED_EXCEPTIONS: tuple[type[BaseException], ...] = (
    StarletteHTTPException,
    RequestValidationError,
    AuthenticationError,
    RequestError,
    UnexpectedDocumentError,
    ValidationFailedError,
    JsonApiError,
    Exception,
)


async def native_exception_response(request: Request, exc: Exception) -> Response:
    """Render ``exc`` the way the application would without JSON:API support."""

    if isinstance(exc, StarletteHTTPException):
        return await http_exception_handler(request, exc)
    if isinstance(exc, RequestValidationError):
        return await request_validation_exception_handler(request, exc)
    if isinstance(exc, ValidationFailedError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.errors})
    if isinstance(exc, AuthenticationError):
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": str(exc)})
    if isinstance(exc, (RequestError, UnexpectedDocumentError)):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})
    return PlainTextResponse("Internal Server Error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI, parser: ExceptionParser | None = None) -> ExceptionParser:
    """Attach the JSON:API exception parser to a FastAPI app instance."""

    parser = parser or ExceptionParser.make()
    logger.info("Registering JSON:API error handlers with debug=%s", parser.debug)

    async def render_exception(request: Request, exc: Exception) -> Response:
        response = parser.render(request, exc)
        if response is not None:
            return response
        return await native_exception_response(request, exc)

    for exc_class in HANDLED_EXCEPTIONS:
        app.add_exception_handler(exc_class, render_exception)

    return parser
