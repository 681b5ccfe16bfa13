"""Render exceptions raised while handling HTTP requests as JSON:API error documents."""

from jsonapi_exceptions.core.config import JSON_API_MEDIA_TYPE
from jsonapi_exceptions.core.config import ExceptionSettings
from jsonapi_exceptions.core.config import get_exception_settings
from jsonapi_exceptions.core.errors import BadRequestError
from jsonapi_exceptions.core.errors import ConflictingHeadersError
from jsonapi_exceptions.core.errors import JsonApiError
from jsonapi_exceptions.core.errors import RequestError
from jsonapi_exceptions.core.errors import UnexpectedDocumentError
from jsonapi_exceptions.core.errors import ValidationFailedError
from jsonapi_exceptions.documents import decode_document
from jsonapi_exceptions.integration import register_error_handlers
from jsonapi_exceptions.parser import ExceptionParser
from jsonapi_exceptions.responses import ErrorProvider
from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.responses import JsonApiResponse
from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.schemas.error import ErrorDocument
from jsonapi_exceptions.schemas.error import ErrorList
from jsonapi_exceptions.schemas.error import ErrorSource
from jsonapi_exceptions.translation import IdentityTranslator
from jsonapi_exceptions.translation import MappingTranslator
from jsonapi_exceptions.translation import Translator

__all__ = [
    "BadRequestError",
    "ConflictingHeadersError",
    "Error",
    "ErrorDocument",
    "ErrorList",
    "ErrorProvider",
    "ErrorResponse",
    "ErrorSource",
    "ExceptionParser",
    "ExceptionSettings",
    "IdentityTranslator",
    "JSON_API_MEDIA_TYPE",
    "JsonApiError",
    "JsonApiResponse",
    "MappingTranslator",
    "RequestError",
    "Translator",
    "UnexpectedDocumentError",
    "ValidationFailedError",
    "decode_document",
    "get_exception_settings",
    "register_error_handlers",
]
