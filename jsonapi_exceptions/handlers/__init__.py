"""Exception handlers available to the parser chain."""

from jsonapi_exceptions.handlers.authentication import AuthenticationHandler
from jsonapi_exceptions.handlers.base import ExceptionHandler
from jsonapi_exceptions.handlers.default import DefaultErrorHandler
from jsonapi_exceptions.handlers.http_exception import HttpExceptionHandler
from jsonapi_exceptions.handlers.request import RequestExceptionHandler
from jsonapi_exceptions.handlers.unexpected_document import UnexpectedDocumentHandler
from jsonapi_exceptions.handlers.validation import ValidationHandler

__all__ = [
    "AuthenticationHandler",
    "DefaultErrorHandler",
    "ExceptionHandler",
    "HttpExceptionHandler",
    "RequestExceptionHandler",
    "UnexpectedDocumentHandler",
    "ValidationHandler",
]
