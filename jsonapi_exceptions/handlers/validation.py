"""Validation failure handler."""

from __future__ import annotations

from fastapi.exceptions import RequestValidationError

from jsonapi_exceptions.core.errors import ValidationFailedError
from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.schemas.error import ErrorList
from jsonapi_exceptions.titles import HttpTitles
from jsonapi_exceptions.translation import Translator
from jsonapi_exceptions.validation import UNPROCESSABLE_ENTITY
from jsonapi_exceptions.validation import ErrorFactory


class ValidationHandler:
    """Render validation failures as one error per failing field message."""

    def __init__(
        self,
        translator: Translator | None = None,
        titles: HttpTitles | None = None,
        factory: ErrorFactory | None = None,
    ) -> None:
        self._titles = titles or HttpTitles(translator)
        self._factory = factory or ErrorFactory(titles=self._titles)

    def handle(self, exc: BaseException) -> ErrorResponse | None:
        if isinstance(exc, ValidationFailedError):
            errors = self._factory.create_errors(exc.messages())
            return ErrorResponse(self._with_status(errors, exc.status_code))
        if isinstance(exc, RequestValidationError):
            return ErrorResponse(self._factory.from_request_validation(exc))
        return None

    def _with_status(self, errors: ErrorList, status_code: int) -> ErrorList:
        if status_code == UNPROCESSABLE_ENTITY:
            return errors
        title = self._titles(status_code)
        return ErrorList(
            [error.model_copy(update={"status": str(status_code), "title": title}) for error in errors]
        )
