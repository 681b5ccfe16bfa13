"""Fallback conversion for exceptions no other handler recognised."""

from __future__ import annotations

from collections.abc import Iterator
from types import TracebackType
from typing import Any
import traceback

from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.schemas.error import ErrorList
from jsonapi_exceptions.titles import HttpTitles
from jsonapi_exceptions.translation import Translator

INTERNAL_SERVER_ERROR = 500


def iter_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield ``exc`` followed by each wrapped cause, outermost first."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__


def exception_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def exception_code(exc: BaseException) -> str:
    code = getattr(exc, "code", None)
    if code is None:
        code = getattr(exc, "errno", None)
    return "0" if code is None else str(code)


def _innermost(tb: TracebackType) -> TracebackType:
    while tb.tb_next is not None:
        tb = tb.tb_next
    return tb


def stack_trace(exc: BaseException) -> list[dict[str, Any]]:
    """Frames of the exception's traceback, most recent call first, without argument values."""
    frames = [
        {"file": frame.filename, "line": frame.lineno, "function": frame.name}
        for frame in traceback.extract_tb(exc.__traceback__)
    ]
    frames.reverse()
    return frames


def raise_site(exc: BaseException) -> tuple[str, int] | None:
    """File and line where ``exc`` was raised, if it ever was."""
    if exc.__traceback__ is None:
        return None
    raised_at = _innermost(exc.__traceback__)
    return raised_at.tb_frame.f_code.co_filename, raised_at.tb_lineno


def debug_meta(exc: BaseException, location: tuple[str, int] | None = None) -> dict[str, Any]:
    """Debug members for ``exc``; ``location`` stands in for causes that were attached but never raised."""
    meta: dict[str, Any] = {"exception": exception_name(exc)}
    location = raise_site(exc) or location
    if location is not None:
        meta["file"], meta["line"] = location
    meta["trace"] = stack_trace(exc)
    return meta


class DefaultErrorHandler:
    """Build the generic 500 response, optionally exposing debug details."""

    def __init__(self, translator: Translator | None = None, titles: HttpTitles | None = None) -> None:
        self._titles = titles or HttpTitles(translator)

    def handle(self, exc: BaseException, *, debug: bool = False, default: Error | None = None) -> ErrorResponse:
        if default is not None:
            return ErrorResponse(default)

        errors: list[Error] = []
        location: tuple[str, int] | None = None
        for item in iter_exception_chain(exc):
            # `raise A from B()` never raises B, so it inherits the site that attached it
            location = raise_site(item) or location
            errors.append(self._to_error(item, debug, location))
        return ErrorResponse(ErrorList(errors))

    def _to_error(self, exc: BaseException, debug: bool, location: tuple[str, int] | None) -> Error:
        error = Error(status=INTERNAL_SERVER_ERROR, title=self._titles(INTERNAL_SERVER_ERROR))
        if not debug:
            return error
        return error.model_copy(
            update={
                "code": exception_code(exc),
                "detail": str(exc) or None,
                "meta": debug_meta(exc, location),
            }
        )
