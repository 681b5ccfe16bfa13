"""Exception parser: decides whether to render JSON:API errors and builds them."""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any
import logging

from starlette.requests import Request
from starlette.responses import Response

from jsonapi_exceptions.core.config import DEFAULT_JSONAPI_VERSION
from jsonapi_exceptions.core.config import JSON_API_MEDIA_TYPE
from jsonapi_exceptions.core.config import ExceptionSettings
from jsonapi_exceptions.core.config import get_exception_settings
from jsonapi_exceptions.core.errors import JsonApiError
from jsonapi_exceptions.handlers import AuthenticationHandler
from jsonapi_exceptions.handlers import DefaultErrorHandler
from jsonapi_exceptions.handlers import ExceptionHandler
from jsonapi_exceptions.handlers import HttpExceptionHandler
from jsonapi_exceptions.handlers import RequestExceptionHandler
from jsonapi_exceptions.handlers import UnexpectedDocumentHandler
from jsonapi_exceptions.handlers import ValidationHandler
from jsonapi_exceptions.negotiation import acceptable_content_types
from jsonapi_exceptions.negotiation import route_middleware
from jsonapi_exceptions.negotiation import wants_json
from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.titles import HttpTitles
from jsonapi_exceptions.translation import IdentityTranslator
from jsonapi_exceptions.translation import Translator

logger = logging.getLogger(__name__)

AcceptPredicate = Callable[[Request, BaseException], bool]


def default_handlers(translator: Translator | None = None) -> list[ExceptionHandler]:
    """Return the standard handler chain, in evaluation order."""
    translator = translator or IdentityTranslator()
    titles = HttpTitles(translator)
    return [
        AuthenticationHandler(translator, titles),
        HttpExceptionHandler(translator, titles),
        RequestExceptionHandler(translator, titles),
        UnexpectedDocumentHandler(translator),
        ValidationHandler(translator, titles),
    ]


def _checked(handlers: Iterable[ExceptionHandler]) -> list[ExceptionHandler]:
    checked = list(handlers)
    for handler in checked:
        if not callable(getattr(handler, "handle", None)):
            raise TypeError(f"Exception handler {handler!r} must define handle()")
    return checked


class ExceptionParser:
    """Render exceptions as JSON:API error responses.

    Exceptions run through an ordered chain of handlers; the first handler
    returning a response wins and anything unrecognised falls through to the
    default 500 error. Rendering only happens when the request asked for the
    JSON:API media type, an acceptance predicate matched, the exception is a
    ``JsonApiError``, or the parser is set to always render.

    Configure the parser before it serves requests; the chain, predicates and
    flags are read-only while rendering.
    """

    def __init__(
        self,
        handlers: Iterable[ExceptionHandler] | None = None,
        *,
        translator: Translator | None = None,
        debug: bool = False,
        jsonapi_version: str = DEFAULT_JSONAPI_VERSION,
    ) -> None:
        self._translator = translator or IdentityTranslator()
        self._handlers = _checked(handlers) if handlers is not None else default_handlers(self._translator)
        self._fallback = DefaultErrorHandler(self._translator)
        self._predicates: list[AcceptPredicate] = []
        self._default: Error | None = None
        self._always_render = False
        self._debug = debug
        self._jsonapi_version = jsonapi_version

    @classmethod
    def make(
        cls,
        settings: ExceptionSettings | None = None,
        *,
        translator: Translator | None = None,
    ) -> ExceptionParser:
        """Build a parser configured from ``settings`` (the environment by default)."""
        settings = settings or get_exception_settings()
        logger.info("Building exception parser with settings=%s", settings.safe_for_logging())
        return cls(
            translator=translator,
            debug=settings.debug,
            jsonapi_version=settings.jsonapi_version,
        ).always_render(settings.always_render)

    @classmethod
    def renderer(cls) -> Callable[[Request, BaseException], Response | None]:
        """Return a render callable that builds a fresh parser for every exception."""

        def render(request: Request, exc: BaseException) -> Response | None:
            return cls.make().render(request, exc)

        return render

    @property
    def handlers(self) -> tuple[ExceptionHandler, ...]:
        return tuple(self._handlers)

    @property
    def debug(self) -> bool:
        return self._debug

    def using(self, handlers: Iterable[ExceptionHandler] | None) -> ExceptionParser:
        """Replace the handler chain; ``None`` keeps the current chain."""
        if handlers is not None:
            self._handlers = _checked(handlers)
        return self

    def prepend(self, *handlers: ExceptionHandler) -> ExceptionParser:
        """Add handlers before the existing chain."""
        self._handlers = [*_checked(handlers), *self._handlers]
        return self

    def append(self, *handlers: ExceptionHandler) -> ExceptionParser:
        """Add handlers after the existing chain."""
        self._handlers = [*self._handlers, *_checked(handlers)]
        return self

    def with_default(self, error: Error | Mapping[str, Any]) -> ExceptionParser:
        """Use ``error`` for every exception no handler recognises."""
        self._default = Error.cast(error)
        return self

    def with_debug(self, debug: bool = True) -> ExceptionParser:
        """Toggle exposure of exception details in fallback errors."""
        self._debug = debug
        return self

    def accept(self, predicate: AcceptPredicate) -> ExceptionParser:
        """Render whenever ``predicate(request, exc)`` is true."""
        if not callable(predicate):
            raise TypeError("Accept predicate must be callable")
        self._predicates.append(predicate)
        return self

    def accepts_json(self) -> ExceptionParser:
        """Render for any request preferring a JSON content type."""
        return self.accept(lambda request, exc: wants_json(request))

    def accepts_middleware(self, *names: str) -> ExceptionParser:
        """Render when any of ``names`` is active on the request's route."""
        wanted = frozenset(names)
        return self.accept(lambda request, exc: not wanted.isdisjoint(route_middleware(request)))

    def always_render(self, always: bool = True) -> ExceptionParser:
        """Render every exception regardless of the request."""
        self._always_render = always
        return self

    def is_renderable(self, request: Request, exc: BaseException) -> bool:
        """Whether ``exc`` should be rendered as a JSON:API error for ``request``."""
        if self._always_render:
            return True

        if any(predicate(request, exc) for predicate in self._predicates):
            return True

        if isinstance(exc, JsonApiError):
            return True

        acceptable = acceptable_content_types(request)
        return bool(acceptable) and acceptable[0] == JSON_API_MEDIA_TYPE

    def parse(self, request: Request, exc: BaseException) -> ErrorResponse:
        """Convert ``exc`` to an error response."""
        if isinstance(exc, JsonApiError):
            response = exc.prepare_response(request)
        else:
            response = self._run_chain(exc)
        return response.with_jsonapi_version(self._jsonapi_version)

    def render(self, request: Request, exc: BaseException) -> Response | None:
        """Render ``exc`` as a JSON:API response, or ``None`` to leave it to the host."""
        if not self.is_renderable(request, exc):
            return None
        return self.parse(request, exc).to_response()

    def _run_chain(self, exc: BaseException) -> ErrorResponse:
        for handler in self._handlers:
            response = handler.handle(exc)
            if response is not None:
                logger.debug("Converted %s with %s", type(exc).__name__, type(handler).__name__)
                return response

        logger.debug("No handler matched %s; using default error (debug=%s)", type(exc).__name__, self._debug)
        return self._fallback.handle(exc, debug=self._debug, default=self._default)
