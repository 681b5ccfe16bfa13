"""Authentication failure handler."""

from __future__ import annotations

from starlette.authentication import AuthenticationError

from jsonapi_exceptions.handlers.base import translated_detail
from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.titles import HttpTitles
from jsonapi_exceptions.translation import IdentityTranslator
from jsonapi_exceptions.translation import Translator

UNAUTHORIZED = 401


class AuthenticationHandler:
    """Render authentication failures as a 401 error."""

    def __init__(self, translator: Translator | None = None, titles: HttpTitles | None = None) -> None:
        self._translator = translator or IdentityTranslator()
        self._titles = titles or HttpTitles(self._translator)

    def handle(self, exc: BaseException) -> ErrorResponse | None:
        if isinstance(exc, AuthenticationError):
            return ErrorResponse(self._to_error(exc))
        return None

    def _to_error(self, exc: AuthenticationError) -> Error:
        return Error(
            status=UNAUTHORIZED,
            title=self._titles(UNAUTHORIZED),
            detail=translated_detail(self._translator, str(exc)),
        )
