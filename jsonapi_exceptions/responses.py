"""Error responses and their conversion to HTTP responses."""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from dataclasses import replace
from typing import Any
from typing import Protocol
from typing import Union
from typing import runtime_checkable

from starlette.responses import JSONResponse

from jsonapi_exceptions.core.config import DEFAULT_JSONAPI_VERSION
from jsonapi_exceptions.core.config import JSON_API_MEDIA_TYPE
from jsonapi_exceptions.schemas.error import Error
from jsonapi_exceptions.schemas.error import ErrorDocument
from jsonapi_exceptions.schemas.error import ErrorList
from jsonapi_exceptions.schemas.error import JsonApiObject


@runtime_checkable
class ErrorProvider(Protocol):
    """Object able to produce a list of JSON:API errors."""

    def to_errors(self) -> ErrorList:
        ...


ErrorSourceValue = Union[Error, ErrorList, ErrorProvider, Mapping[str, Any], Sequence[Error]]


class JsonApiResponse(JSONResponse):
    """JSON response using the JSON:API media type."""

    media_type = JSON_API_MEDIA_TYPE


def _to_error_list(errors: ErrorSourceValue) -> ErrorList:
    if isinstance(errors, ErrorList):
        return errors
    if isinstance(errors, ErrorProvider):
        return errors.to_errors()
    return ErrorList.cast(errors)


def _status_from(error: Error) -> int | None:
    if error.status is None:
        return None
    try:
        return int(error.status)
    except ValueError:
        return None


@dataclass(frozen=True)
class ErrorResponse:
    """One or more errors plus the HTTP details needed to send them."""

    errors: ErrorSourceValue
    headers: Mapping[str, str] = field(default_factory=dict)
    status: int | None = None
    jsonapi_version: str = DEFAULT_JSONAPI_VERSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", _to_error_list(self.errors))
        object.__setattr__(self, "headers", dict(self.headers))

    @classmethod
    def error(cls, error: Error | Mapping[str, Any]) -> ErrorResponse:
        """Build a response holding a single error."""
        return cls(Error.cast(error))

    def with_headers(self, headers: Mapping[str, str] | None) -> ErrorResponse:
        """Return a copy with ``headers`` merged over the existing ones."""
        if not headers:
            return self
        return replace(self, headers={**self.headers, **headers})

    def with_status(self, status: int | None) -> ErrorResponse:
        """Return a copy with an explicit HTTP status."""
        return replace(self, status=status)

    def with_jsonapi_version(self, version: str) -> ErrorResponse:
        """Return a copy advertising ``version`` in the ``jsonapi`` member."""
        return replace(self, jsonapi_version=version)

    @property
    def status_code(self) -> int:
        """Explicit status, else the first error's status, else 500."""
        if self.status is not None:
            return self.status
        if len(self.errors):
            status = _status_from(self.errors[0])
            if status is not None:
                return status
        return 500

    def to_document(self) -> ErrorDocument:
        """Build the top-level JSON:API error document."""
        return ErrorDocument(
            errors=list(self.errors),
            jsonapi=JsonApiObject(version=self.jsonapi_version),
        )

    def to_response(self) -> JsonApiResponse:
        """Convert to a Starlette response."""
        return JsonApiResponse(
            content=self.to_document().to_dict(),
            status_code=self.status_code,
            headers=dict(self.headers),
        )
