"""String lookup used to localize titles and messages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol


class Translator(Protocol):
    """Anything that can look up a translated string by key."""

    def get(self, key: str) -> str:
        ...


class IdentityTranslator:
    """Translator that returns every key unchanged."""

    def get(self, key: str) -> str:
        return key


class MappingTranslator:
    """Translator backed by a plain key to message mapping."""

    def __init__(self, messages: Mapping[str, str]) -> None:
        self._messages = dict(messages)

    def get(self, key: str) -> str:
        return self._messages.get(key, key)
