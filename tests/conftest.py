"""Shared pytest fixtures for jsonapi-exceptions test suites."""

from collections.abc import Callable
from pathlib import Path
import sys

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

JSON_API = "application/vnd.api+json"


@pytest.fixture
def jsonapi_headers() -> dict[str, str]:
    """Accept header asking for the JSON:API media type."""
    return {"Accept": JSON_API}


@pytest.fixture
def raising_app() -> Callable[..., tuple[FastAPI, TestClient]]:
    """Build an app whose ``/test`` route raises the given exception."""
    from jsonapi_exceptions.integration import register_error_handlers
    from jsonapi_exceptions.parser import ExceptionParser

    def build(exc: BaseException, parser: ExceptionParser | None = None) -> tuple[FastAPI, TestClient]:
        app = FastAPI()
        register_error_handlers(app, parser or ExceptionParser())

        @app.get("/test")
        def raise_exception() -> None:
            raise exc

        return app, TestClient(app, raise_server_exceptions=False)

    return build
