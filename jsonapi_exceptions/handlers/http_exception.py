"""Handler for exceptions that carry their own HTTP status."""

from __future__ import annotations

from collections.abc import Mapping
import http

from starlette.exceptions import HTTPException as StarletteHTTPException

from jsonapi_exceptions.handlers.base import translated_detail
from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.titles import HttpTitles
from jsonapi_exceptions.translation import IdentityTranslator
from jsonapi_exceptions.translation import Translator


def _default_phrase(status_code: int) -> str | None:
    try:
        return http.HTTPStatus(status_code).phrase
    except ValueError:
        return None


class HttpExceptionHandler:
    """Render HTTP exceptions using their status code and headers.

    Starlette substitutes the standard reason phrase when an exception is
    raised without a detail, so a detail equal to that phrase is treated as
    no detail at all. Mapping details may provide ``detail`` and ``code``
    members directly. Details that are not strings are rendered with ``str()``.
    """

    def __init__(self, translator: Translator | None = None, titles: HttpTitles | None = None) -> None:
        self._translator = translator or IdentityTranslator()
        self._titles = titles or HttpTitles(self._translator)

    def handle(self, exc: BaseException) -> ErrorResponse | None:
        if isinstance(exc, StarletteHTTPException):
            return ErrorResponse(self._to_error(exc)).with_headers(exc.headers)
        return None

    def _to_error(self, exc: StarletteHTTPException) -> Error:
        status_code = exc.status_code
        code: str | None = None
        detail = exc.detail

        if isinstance(detail, Mapping):
            code = detail.get("code")
            detail = detail.get("detail")
        elif detail == _default_phrase(status_code):
            detail = None

        if detail is not None and not isinstance(detail, str):
            detail = str(detail)

        return Error(
            status=status_code,
            code=code,
            title=self._titles(status_code),
            detail=translated_detail(self._translator, detail),
        )
