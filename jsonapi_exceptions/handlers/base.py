"""Shared contract for exception handlers in the parser chain."""

from __future__ import annotations

from typing import Protocol

from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.translation import Translator


class ExceptionHandler(Protocol):
    """Converts one category of exception, returning ``None`` for anything else."""

    def handle(self, exc: BaseException) -> ErrorResponse | None:
        ...


def translated_detail(translator: Translator, message: object) -> str | None:
    """Translate an exception message, treating empty messages as absent."""
    if not isinstance(message, str) or not message:
        return None
    return translator.get(message)
