"""Exception rendering configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

JSON_API_MEDIA_TYPE = "application/vnd.api+json"
DEFAULT_JSONAPI_VERSION = "1.0"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class ExceptionSettings:
    """Runtime settings for JSON:API exception rendering."""

    debug: bool = False
    always_render: bool = False
    jsonapi_version: str = DEFAULT_JSONAPI_VERSION

    def safe_for_logging(self) -> dict[str, str | bool]:
        """Return exception settings safe for logs."""
        return {
            "debug": self.debug,
            "always_render": self.always_render,
            "jsonapi_version": self.jsonapi_version,
        }


@lru_cache(maxsize=1)
def get_exception_settings() -> ExceptionSettings:
    """Load exception rendering settings from the environment."""
    return ExceptionSettings(
        debug=_get_bool_env("JSONAPI_EXCEPTIONS_DEBUG", False),
        always_render=_get_bool_env("JSONAPI_EXCEPTIONS_ALWAYS_RENDER", False),
        jsonapi_version=os.getenv("JSONAPI_EXCEPTIONS_VERSION", DEFAULT_JSONAPI_VERSION),
    )
