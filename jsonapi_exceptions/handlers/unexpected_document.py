"""Handler for request bodies that could not be decoded."""

from __future__ import annotations

from fastapi.exceptions import RequestValidationError

from jsonapi_exceptions.core.errors import UnexpectedDocumentError
from jsonapi_exceptions.handlers.base import translated_detail
from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.translation import IdentityTranslator
from jsonapi_exceptions.translation import Translator

BAD_REQUEST = 400
INVALID_JSON = "Invalid JSON"


def _is_invalid_json(exc: RequestValidationError) -> bool:
    issues = exc.errors()
    return bool(issues) and all(issue.get("type") == "json_invalid" for issue in issues)


class UnexpectedDocumentHandler:
    """Render undecodable request documents as a 400 "Invalid JSON" error.

    When the failure wraps the decoder's own error, that inner error supplies
    the detail (and code, if it has one). FastAPI reports undecodable JSON
    bodies as a request validation error chained from the decode error, so
    those are recognised here as well.
    """

    def __init__(self, translator: Translator | None = None) -> None:
        self._translator = translator or IdentityTranslator()

    def handle(self, exc: BaseException) -> ErrorResponse | None:
        if isinstance(exc, UnexpectedDocumentError):
            return ErrorResponse(self._to_error(exc))
        if isinstance(exc, RequestValidationError) and _is_invalid_json(exc):
            return ErrorResponse(self._to_error(exc))
        return None

    def _to_error(self, exc: BaseException) -> Error:
        source = exc.__cause__ if isinstance(exc.__cause__, ValueError) else exc
        return Error(
            status=BAD_REQUEST,
            code=getattr(source, "code", None),
            title=self._translator.get(INVALID_JSON),
            detail=translated_detail(self._translator, str(source)),
        )
