"""Decoding of JSON:API request documents."""

from __future__ import annotations

import json
from typing import Any

from jsonapi_exceptions.core.errors import UnexpectedDocumentError


def decode_document(body: bytes | str) -> dict[str, Any]:
    """Decode a request body that must hold a JSON object."""
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise UnexpectedDocumentError("Invalid JSON document.") from exc

    if not body.strip():
        raise UnexpectedDocumentError("Expecting JSON to decode.")

    try:
        document = json.loads(body)
    except json.JSONDecodeError as exc:
        raise UnexpectedDocumentError("Invalid JSON document.") from exc

    if not isinstance(document, dict):
        raise UnexpectedDocumentError("Expecting JSON to decode to an object.")

    return document
