"""Pagination and sort links for FastAPI/Starlette templates."""

from .core.config import DEFAULT_CONFIG, PaginationConfig
from .core.errors import (
    AmbiguousPageObjectError,
    InvalidPageObjectError,
    MissingPageObjectError,
    PaginationError,
    UnsupportedRequestEnvironmentError,
)
from .middleware import PaginationErrorMiddleware
from .pagination import PageLinkBuilder, find_page
from .schemas import Direction, Order, Page, Sort
from .templating import install_pagination_globals
from .utils import Pageable, pageable_dependency, parse_pageable
from .web import JinjaTemplateContext, SimpleTemplateContext

__all__ = [
    "DEFAULT_CONFIG",
    "PaginationConfig",
    "AmbiguousPageObjectError",
    "InvalidPageObjectError",
    "MissingPageObjectError",
    "PaginationError",
    "UnsupportedRequestEnvironmentError",
    "PaginationErrorMiddleware",
    "PageLinkBuilder",
    "find_page",
    "Direction",
    "Order",
    "Page",
    "Sort",
    "install_pagination_globals",
    "Pageable",
    "pageable_dependency",
    "parse_pageable",
    "JinjaTemplateContext",
    "SimpleTemplateContext",
]
