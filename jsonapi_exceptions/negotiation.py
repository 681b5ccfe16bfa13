"""Request inspection helpers used by acceptance rules."""

from __future__ import annotations

import math

from starlette.requests import Request


def _parse_quality(params: list[str]) -> float:
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            quality = float(value.strip())
        except ValueError:
            return 0.0
        if not math.isfinite(quality):
            return 0.0
        return min(max(quality, 0.0), 1.0)
    return 1.0


def parse_accept(header: str | None) -> list[str]:
    """Return media ranges from an Accept header, most preferred first."""
    if not header:
        return []

    ranked: list[tuple[float, int, str]] = []
    for index, item in enumerate(header.split(",")):
        media_type, *params = item.split(";")
        media_type = media_type.strip()
        if not media_type:
            continue
        quality = _parse_quality(params)
        if quality <= 0:
            continue
        ranked.append((-quality, index, media_type))

    return [media_type for _, _, media_type in sorted(ranked)]


def acceptable_content_types(request: Request) -> list[str]:
    """Return the request's acceptable content types, most preferred first."""
    return parse_accept(request.headers.get("accept"))


def wants_json(request: Request) -> bool:
    """Whether the client's preferred content type is a JSON type."""
    acceptable = acceptable_content_types(request)
    if not acceptable:
        return False
    preferred = acceptable[0].lower()
    return "/json" in preferred or "+json" in preferred


def route_middleware(request: Request) -> frozenset[str]:
    """Names of the dependencies and middleware active for the request's route."""
    names: set[str] = set()

    route = request.scope.get("route")
    for dependency in getattr(route, "dependencies", None) or ():
        call = getattr(dependency, "dependency", None)
        if call is not None:
            names.add(getattr(call, "__name__", type(call).__name__))

    app = request.scope.get("app")
    for middleware in getattr(app, "user_middleware", None) or ():
        cls = getattr(middleware, "cls", None)
        if cls is not None:
            names.add(getattr(cls, "__name__", str(cls)))

    return frozenset(names)
