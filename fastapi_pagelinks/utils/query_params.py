"""Helpers for reading page, size and sort query parameters back."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from fastapi import Request
from pydantic import BaseModel, ConfigDict, Field

from fastapi_pagelinks.core import keys
from fastapi_pagelinks.schemas.page import Direction, Order, Page, Sort

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 2000


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def _parse_direction(value: str) -> Direction | None:
    try:
        return Direction.from_string(value)
    except ValueError:
        return None


def parse_sort_param(value: str) -> list[Order]:
    """Parse ``field``, ``field,desc`` or ``a,b,asc`` into orders.

    A trailing direction applies to every field listed before it.
    """
    parts = _split_csv(value)
    if not parts:
        return []
    direction = _parse_direction(parts[-1]) if len(parts) > 1 else None
    if direction is not None:
        parts = parts[:-1]
    return [Order(field=field, direction=direction or Direction.ASC) for field in parts]


class Pageable(BaseModel):
    """Requested page, size and sort."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    sort: Sort = Field(default_factory=Sort)

    @property
    def offset(self) -> int:
        return self.page * self.size

    def to_page(self, content: list[Any], total_elements: int) -> Page:
        """Wrap an already sliced ``content`` as a ``Page``."""
        return Page(
            content=content,
            number=self.page,
            size=self.size,
            total_elements=total_elements,
            sort=self.sort,
        )


def _get_all(params: Any, name: str) -> list[str]:
    if hasattr(params, "getlist"):
        return [str(value) for value in params.getlist(name)]
    value = params.get(name)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


def _parse_int(raw: list[str], default: int, name: str) -> int:
    if not raw:
        return default
    try:
        return int(raw[0])
    except ValueError:
        logger.debug("Ignoring non-numeric %s parameter %r", name, raw[0])
        return default


def parse_pageable(
    params: Mapping[str, Any],
    prefix: str | None = None,
    *,
    default_size: int = DEFAULT_PAGE_SIZE,
    max_size: int = MAX_PAGE_SIZE,
) -> Pageable:
    """Build a ``Pageable`` from query parameters.

    ``prefix`` is the qualifier used when the links were generated, so
    ``prefix="users"`` reads ``users_page``, ``users_size`` and ``users_sort``.
    Negative pages and out-of-range sizes fall back to the defaults.
    """
    name_prefix = f"{prefix}{keys.UNDERSCORE}" if prefix else keys.EMPTY

    page = _parse_int(_get_all(params, name_prefix + keys.PAGE), 0, "page")
    if page < 0:
        page = 0

    size = _parse_int(_get_all(params, name_prefix + keys.SIZE), default_size, "size")
    if size < 1:
        size = default_size
    size = min(size, max_size)

    orders: list[Order] = []
    for raw_sort in _get_all(params, name_prefix + keys.SORT):
        orders.extend(parse_sort_param(raw_sort))

    return Pageable(page=page, size=size, sort=Sort(orders=orders))


def pageable_dependency(
    prefix: str | None = None,
    *,
    default_size: int = DEFAULT_PAGE_SIZE,
    max_size: int = MAX_PAGE_SIZE,
) -> Callable[[Request], Pageable]:
    """Return a FastAPI dependency reading a ``Pageable`` from the query string.

    Examples:
        @app.get("/items")
        async def list_items(pageable: Pageable = Depends(pageable_dependency())):
            ...
    """

    def dependency(request: Request) -> Pageable:
        return parse_pageable(
            request.query_params,
            prefix,
            default_size=default_size,
            max_size=max_size,
        )

    return dependency
