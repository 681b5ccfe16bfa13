"""Malformed request handler."""

from __future__ import annotations

from jsonapi_exceptions.core.errors import RequestError
from jsonapi_exceptions.handlers.base import translated_detail
from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.titles import HttpTitles
from jsonapi_exceptions.translation import IdentityTranslator
from jsonapi_exceptions.translation import Translator

BAD_REQUEST = 400


class RequestExceptionHandler:
    """Render structurally invalid requests as a 400 error."""

    def __init__(self, translator: Translator | None = None, titles: HttpTitles | None = None) -> None:
        self._translator = translator or IdentityTranslator()
        self._titles = titles or HttpTitles(self._translator)

    def handle(self, exc: BaseException) -> ErrorResponse | None:
        if not isinstance(exc, RequestError):
            return None
        return ErrorResponse(
            Error(
                status=BAD_REQUEST,
                title=self._titles(BAD_REQUEST),
                detail=translated_detail(self._translator, str(exc)),
            )
        )
