"""Failure types understood by the exception parser."""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from typing import TYPE_CHECKING
from typing import Any

from jsonapi_exceptions.responses import ErrorResponse
from jsonapi_exceptions.responses import ErrorSourceValue
from jsonapi_exceptions.schemas.error import Error

if TYPE_CHECKING:
    from starlette.requests import Request


class JsonApiError(Exception):
    """Exception that already knows which JSON:API errors it represents."""

    def __init__(
        self,
        errors: ErrorSourceValue,
        *,
        headers: Mapping[str, str] | None = None,
        status_code: int | None = None,
        message: str = "JSON:API error",
    ) -> None:
        super().__init__(message)
        self.errors = ErrorResponse(errors).errors
        self.headers = dict(headers) if headers else {}
        self.status_code = status_code

    @classmethod
    def error(cls, error: Error | Mapping[str, Any], **kwargs: Any) -> JsonApiError:
        """Create an exception for a single error."""
        return cls(Error.cast(error), **kwargs)

    def with_headers(self, headers: Mapping[str, str]) -> JsonApiError:
        """Add response headers and return the exception for raising."""
        self.headers.update(headers)
        return self

    def prepare_response(self, request: Request | None = None) -> ErrorResponse:
        """Build the error response for this exception."""
        return ErrorResponse(self.errors, headers=self.headers, status=self.status_code)


class RequestError(Exception):
    """The inbound request is structurally invalid."""


class BadRequestError(RequestError):
    """Generic malformed request."""


class ConflictingHeadersError(RequestError):
    """The request carries headers that contradict each other."""


class UnexpectedDocumentError(ValueError):
    """The request body is not the expected JSON document."""


class ValidationFailedError(Exception):
    """Validation failed for one or more fields of the request."""

    def __init__(
        self,
        errors: Mapping[str, str | Sequence[str]],
        *,
        status_code: int = 422,
        message: str = "The given data was invalid.",
    ) -> None:
        super().__init__(message)
        self.errors = dict(errors)
        self.status_code = status_code

    def messages(self) -> list[tuple[str, str]]:
        """Flatten to ``(field, message)`` pairs in registration order."""
        pairs: list[tuple[str, str]] = []
        for field, messages in self.errors.items():
            if isinstance(messages, str):
                pairs.append((field, messages))
                continue
            pairs.extend((field, message) for message in messages)
        return pairs

