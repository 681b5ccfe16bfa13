"""JSON:API error object schemas."""

from __future__ import annotations

from collections.abc import Iterator
from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import RootModel
from pydantic import field_validator

from jsonapi_exceptions.core.config import DEFAULT_JSONAPI_VERSION


class ErrorSource(BaseModel):
    """Locator for the part of the request that caused an error."""

    model_config = ConfigDict(frozen=True)

    pointer: str | None = None
    parameter: str | None = None
    header: str | None = None


class Error(BaseModel):
    """Single JSON:API error object."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    links: dict[str, Any] | None = None
    status: str | None = None
    code: str | None = None
    title: str | None = None
    detail: str | None = None
    source: ErrorSource | None = None
    meta: dict[str, Any] | None = None

    @field_validator("id", "status", "code", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @classmethod
    def cast(cls, value: Error | Mapping[str, Any]) -> Error:
        """Return ``value`` as an error, validating mappings."""
        if isinstance(value, Error):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(f"Cannot cast {type(value).__name__} to a JSON:API error")

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error without empty members."""
        return self.model_dump(exclude_none=True)


ErrorLike = Union[Error, Mapping[str, Any]]


class ErrorList(RootModel[list[Error]]):
    """Ordered collection of JSON:API errors."""

    root: list[Error] = []

    def __iter__(self) -> Iterator[Error]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Error:
        return self.root[index]

    @classmethod
    def cast(cls, value: ErrorList | ErrorLike | Sequence[ErrorLike]) -> ErrorList:
        """Return ``value`` as an error list."""
        if isinstance(value, ErrorList):
            return value
        if isinstance(value, (Error, Mapping)):
            return cls([Error.cast(value)])
        return cls([Error.cast(item) for item in value])

    def to_errors(self) -> ErrorList:
        """Satisfy the error provider protocol."""
        return self

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize every error without empty members."""
        return [error.to_dict() for error in self.root]


class JsonApiObject(BaseModel):
    """Top-level ``jsonapi`` member."""

    version: str = DEFAULT_JSONAPI_VERSION


class ErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: list[Error]
    jsonapi: JsonApiObject = JsonApiObject()
    meta: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the document without empty members."""
        return self.model_dump(exclude_none=True)
