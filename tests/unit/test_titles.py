"""Unit tests for HTTP status title resolution."""

from __future__ import annotations

from jsonapi_exceptions.titles import HttpTitles
from jsonapi_exceptions.titles import resolve_title
from jsonapi_exceptions.translation import MappingTranslator


def test_known_statuses_resolve_to_reason_phrases() -> None:
    assert resolve_title(401) == "Unauthorized"
    assert resolve_title(404) == "Not Found"
    assert resolve_title(418) == "I'm a teapot"
    assert resolve_title(422) == "Unprocessable Entity"
    assert resolve_title(500) == "Internal Server Error"


def test_missing_or_unknown_status_has_no_title() -> None:
    assert resolve_title(None) is None
    assert resolve_title(0) is None
    assert resolve_title(419) is None
    assert resolve_title(599) is None


def test_titles_are_passed_through_the_translator() -> None:
    titles = HttpTitles(MappingTranslator({"Not Found": "Introuvable"}))

    assert titles(404) == "Introuvable"
    assert titles(405) == "Method Not Allowed"
