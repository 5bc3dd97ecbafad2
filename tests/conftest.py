"""Shared fixtures for pagination link tests."""

from typing import Any, Callable

import pytest
from starlette.requests import Request

from fastapi_pagelinks.schemas.page import Direction, Page, Sort


def build_scope(
    path: str = "/items",
    query_string: str = "",
    *,
    scheme: str = "http",
    server: tuple[str, int] | None = ("testserver", 80),
    state: dict[str, Any] | None = None,
) -> dict[str, Any]:
    scope: dict[str, Any] = {
        "type": "http",
        "method": "GET",
        "path": path,
        "root_path": "",
        "query_string": query_string.encode(),
        "headers": [],
        "scheme": scheme,
        "server": server,
    }
    if state is not None:
        scope["state"] = state
    return scope


@pytest.fixture
def make_scope() -> Callable[..., dict[str, Any]]:
    return build_scope


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Build a Starlette request for ``path?query_string``."""

    def factory(path: str = "/items", query_string: str = "", **kwargs: Any) -> Request:
        return Request(build_scope(path, query_string, **kwargs))

    return factory


@pytest.fixture
def page() -> Page:
    return Page(content=list(range(20)), number=1, size=20, total_elements=95)


@pytest.fixture
def sorted_page() -> Page:
    return Page(
        content=list(range(20)),
        number=0,
        size=20,
        total_elements=95,
        sort=Sort.by("name", direction=Direction.ASC),
    )
