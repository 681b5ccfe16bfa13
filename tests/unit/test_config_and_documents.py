"""Unit tests for settings loading, document decoding and the validation error factory."""

from __future__ import annotations

from collections.abc import Generator
import json

import pytest

from jsonapi_exceptions.core.config import ExceptionSettings
from jsonapi_exceptions.core.config import get_exception_settings
from jsonapi_exceptions.core.errors import UnexpectedDocumentError
from jsonapi_exceptions.documents import decode_document
from jsonapi_exceptions.translation import IdentityTranslator
from jsonapi_exceptions.translation import MappingTranslator
from jsonapi_exceptions.validation import ErrorFactory
from jsonapi_exceptions.validation import to_pointer


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    get_exception_settings.cache_clear()
    yield
    get_exception_settings.cache_clear()


def test_settings_default_to_production_values(monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
    for name in ("JSONAPI_EXCEPTIONS_DEBUG", "JSONAPI_EXCEPTIONS_ALWAYS_RENDER", "JSONAPI_EXCEPTIONS_VERSION"):
        monkeypatch.delenv(name, raising=False)

    assert get_exception_settings() == ExceptionSettings()


def test_settings_are_read_from_environment(monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
    monkeypatch.setenv("JSONAPI_EXCEPTIONS_DEBUG", "true")
    monkeypatch.setenv("JSONAPI_EXCEPTIONS_ALWAYS_RENDER", "0")
    monkeypatch.setenv("JSONAPI_EXCEPTIONS_VERSION", "1.1")

    settings = get_exception_settings()

    assert settings.debug is True
    assert settings.always_render is False
    assert settings.safe_for_logging() == {"debug": True, "always_render": False, "jsonapi_version": "1.1"}


def test_invalid_boolean_flags_are_rejected(monkeypatch: pytest.MonkeyPatch, fresh_settings: None) -> None:
    monkeypatch.setenv("JSONAPI_EXCEPTIONS_DEBUG", "maybe")

    with pytest.raises(ValueError, match="JSONAPI_EXCEPTIONS_DEBUG"):
        get_exception_settings()


def test_translators() -> None:
    assert IdentityTranslator().get("Not Found") == "Not Found"
    translator = MappingTranslator({"Not Found": "Nicht gefunden"})
    assert translator.get("Not Found") == "Nicht gefunden"
    assert translator.get("Gone") == "Gone"


def test_decode_document_returns_objects() -> None:
    assert decode_document(b'{"data": {"type": "posts"}}') == {"data": {"type": "posts"}}


def test_decode_document_wraps_decode_errors() -> None:
    with pytest.raises(UnexpectedDocumentError) as raised:
        decode_document("{")

    assert isinstance(raised.value.__cause__, json.JSONDecodeError)


@pytest.mark.parametrize("body", [b"", "   ", "[]", "42"])
def test_decode_document_rejects_empty_and_non_object_bodies(body: bytes | str) -> None:
    with pytest.raises(UnexpectedDocumentError):
        decode_document(body)


def test_to_pointer_converts_dotted_paths_and_escapes_segments() -> None:
    assert to_pointer("data.email") == "/data/email"
    assert to_pointer("foo.bar") == "/foo/bar"
    assert to_pointer("a/b.c~d") == "/a~1b/c~0d"
    assert to_pointer(("data", "items", 0)) == "/data/items/0"
    assert to_pointer("") == ""


def test_factory_preserves_pair_order() -> None:
    errors = ErrorFactory().create_errors([("b", "second"), ("a", "first")])

    assert [error.source.pointer for error in errors if error.source] == ["/b", "/a"]
    assert {error.title for error in errors} == {"Unprocessable Entity"}
