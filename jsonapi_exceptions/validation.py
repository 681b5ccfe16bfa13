"""Conversion of validation messages into JSON:API errors."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any

from fastapi.exceptions import RequestValidationError

from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.schemas.error import ErrorList
from jsonapi_exceptions.schemas.error import ErrorSource
from jsonapi_exceptions.titles import HttpTitles
from jsonapi_exceptions.translation import Translator

UNPROCESSABLE_ENTITY = 422

_PARAMETER_LOCATIONS = frozenset({"query", "path", "cookie"})


def _escape(segment: str) -> str:
    return segment.replace("~", "~0").replace("/", "~1")


def to_pointer(path: str | Sequence[Any]) -> str:
    """Convert a dotted field path (or location tuple) to a JSON pointer."""
    if isinstance(path, str):
        segments = [segment for segment in path.split(".") if segment]
    else:
        segments = [str(segment) for segment in path]
    if not segments:
        return ""
    return "/" + "/".join(_escape(segment) for segment in segments)


def _source_for_location(location: Sequence[Any]) -> ErrorSource:
    if not location:
        return ErrorSource(pointer="")

    kind, rest = location[0], list(location[1:])
    if kind == "body":
        return ErrorSource(pointer=to_pointer(rest))
    if kind in _PARAMETER_LOCATIONS and rest:
        return ErrorSource(parameter=".".join(str(part) for part in rest))
    if kind == "header" and rest:
        return ErrorSource(header=str(rest[0]))
    return ErrorSource(pointer=to_pointer(location))


class ErrorFactory:
    """Build 422 errors with source locators from validation messages."""

    def __init__(self, translator: Translator | None = None, titles: HttpTitles | None = None) -> None:
        self._titles = titles or HttpTitles(translator)

    def _error(self, detail: str, source: ErrorSource) -> Error:
        return Error(
            status=UNPROCESSABLE_ENTITY,
            title=self._titles(UNPROCESSABLE_ENTITY),
            detail=detail or None,
            source=source,
        )

    def create_errors(self, messages: Mapping[str, str | Sequence[str]] | Iterable[tuple[str, str]]) -> ErrorList:
        """One error per ``(field, message)`` pair, in registration order."""
        if isinstance(messages, Mapping):
            pairs: list[tuple[str, str]] = []
            for field, value in messages.items():
                if isinstance(value, str):
                    pairs.append((field, value))
                else:
                    pairs.extend((field, message) for message in value)
        else:
            pairs = list(messages)

        return ErrorList([self._error(message, ErrorSource(pointer=to_pointer(field))) for field, message in pairs])

    def from_request_validation(self, exc: RequestValidationError) -> ErrorList:
        """Convert FastAPI request validation issues."""
        errors: list[Error] = []
        for issue in exc.errors():
            location = issue.get("loc", ())
            if not isinstance(location, (tuple, list)):
                location = (location,)
            message = str(issue.get("msg", "Invalid value"))
            errors.append(self._error(message, _source_for_location(location)))
        return ErrorList(errors)
