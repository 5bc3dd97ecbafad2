"""Request capabilities consumed while rebuilding the current URL."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from starlette.datastructures import QueryParams
from starlette.requests import Request

DEFAULT_PORTS = {"http": 80, "https": 443}


def group_parameters(items: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    """Group ``(name, value)`` pairs by name, keeping first-occurrence order."""
    grouped: dict[str, list[str]] = {}
    for name, value in items:
        grouped.setdefault(name, []).append(value)
    return grouped


class WebRequest:
    """Generic view of the current request.

    ``scheme``, ``server_name`` and ``server_port`` may be ``None`` when the
    runtime does not expose them.
    """

    @property
    def scheme(self) -> str | None:
        raise NotImplementedError

    @property
    def server_name(self) -> str | None:
        raise NotImplementedError

    @property
    def server_port(self) -> int | None:
        raise NotImplementedError

    @property
    def request_path(self) -> str:
        raise NotImplementedError

    def parameter_map(self) -> dict[str, list[str]]:
        """Return query parameters as an ordered name -> values mapping."""
        raise NotImplementedError


class RequestURIWebRequest(WebRequest):
    """Request that can report its own URI (path without query string)."""

    @property
    def request_uri(self) -> str:
        raise NotImplementedError


class StarletteWebRequest(RequestURIWebRequest):
    """Adapter over a Starlette/FastAPI ``Request``."""

    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def scheme(self) -> str | None:
        return self._request.url.scheme or None

    @property
    def server_name(self) -> str | None:
        return self._request.url.hostname

    @property
    def server_port(self) -> int | None:
        url = self._request.url
        if url.port is None and url.hostname:
            return DEFAULT_PORTS.get(url.scheme)
        return url.port

    @property
    def request_path(self) -> str:
        return self._request.url.path

    @property
    def request_uri(self) -> str:
        return self._request.url.path

    def parameter_map(self) -> dict[str, list[str]]:
        return group_parameters(self._request.query_params.multi_items())


class ScopeWebRequest(WebRequest):
    """Adapter over a raw ASGI HTTP scope."""

    def __init__(self, scope: Mapping[str, Any]) -> None:
        self._scope = scope

    @property
    def scheme(self) -> str | None:
        return self._scope.get("scheme")

    @property
    def server_name(self) -> str | None:
        server = self._scope.get("server")
        return server[0] if server else None

    @property
    def server_port(self) -> int | None:
        server = self._scope.get("server")
        return server[1] if server else None

    @property
    def request_path(self) -> str:
        return self._scope.get("path", "")

    def parameter_map(self) -> dict[str, list[str]]:
        query_string = self._scope.get("query_string", b"")
        return group_parameters(QueryParams(query_string).multi_items())


class WebExchange:
    """A request together with its request-scoped attributes."""

    request: WebRequest

    def attribute_names(self) -> list[str]:
        raise NotImplementedError

    def get_attribute(self, name: str) -> Any:
        raise NotImplementedError


class StarletteWebExchange(WebExchange):
    """Exchange backed by a Starlette request; attributes live on ``request.state``."""

    def __init__(self, request: Request) -> None:
        self._request = request
        self.request = StarletteWebRequest(request)

    def _attributes(self) -> Mapping[str, Any]:
        return self._request.scope.get("state") or {}

    def attribute_names(self) -> list[str]:
        return list(self._attributes())

    def get_attribute(self, name: str) -> Any:
        return self._attributes().get(name)


class ScopeWebExchange(WebExchange):
    """Exchange backed by a raw ASGI scope and its ``state`` mapping."""

    def __init__(self, scope: Mapping[str, Any]) -> None:
        self._scope = scope
        self.request = ScopeWebRequest(scope)

    def attribute_names(self) -> list[str]:
        return list(self._scope.get("state") or {})

    def get_attribute(self, name: str) -> Any:
        return (self._scope.get("state") or {}).get(name)


def build_exchange(source: Any) -> WebExchange | None:
    """Wrap a request, an ASGI scope or an existing exchange."""
    if source is None:
        return None
    if isinstance(source, WebExchange):
        return source
    if isinstance(source, Request):
        return StarletteWebExchange(source)
    if isinstance(source, Mapping) and "type" in source:
        return ScopeWebExchange(source)
    return None
