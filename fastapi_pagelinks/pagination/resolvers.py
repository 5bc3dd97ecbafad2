"""Locate the active page object in a rendering context.

Sources are tried in a fixed order and the first match wins:

1. the page bound under the page-variable key,
2. the result of evaluating the page expression,
3. the single page found among the request attributes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from fastapi_pagelinks.core.config import DEFAULT_CONFIG, PaginationConfig
from fastapi_pagelinks.core.errors import AmbiguousPageObjectError, MissingPageObjectError
from fastapi_pagelinks.schemas.page import Page
from fastapi_pagelinks.web.context import TemplateContext

logger = logging.getLogger(__name__)

PageResolver = Callable[[TemplateContext, PaginationConfig], Optional[Page]]


def is_page_instance(value: Any) -> bool:
    return isinstance(value, Page)


def resolve_local_variable(context: TemplateContext, config: PaginationConfig) -> Page | None:
    """Return the page bound under the page-variable key."""
    value = context.get_variable(config.page_variable_key)
    return value if is_page_instance(value) else None


def resolve_expression(context: TemplateContext, config: PaginationConfig) -> Page | None:
    """Return the page the page expression evaluates to."""
    value = context.evaluate(config.page_expression)
    return value if is_page_instance(value) else None


def resolve_request_attribute(context: TemplateContext, config: PaginationConfig) -> Page | None:
    """Return the only page stored as a request attribute.

    Raises ``AmbiguousPageObjectError`` when more than one attribute holds a page.
    """
    exchange = context.exchange
    if exchange is None:
        return None

    found: Page | None = None
    found_name: str | None = None
    for name in exchange.attribute_names():
        value = exchange.get_attribute(name)
        if not is_page_instance(value):
            continue
        if found is not None:
            logger.warning(
                "Request attributes %r and %r both hold a Page object", found_name, name
            )
            raise AmbiguousPageObjectError([found_name, name])
        found, found_name = value, name
    return found


RESOLVERS: tuple[PageResolver, ...] = (
    resolve_local_variable,
    resolve_expression,
    resolve_request_attribute,
)


def find_page(context: TemplateContext, config: PaginationConfig | None = None) -> Page:
    """Return the page object for the current render or raise ``InvalidPageObjectError``."""
    config = config or DEFAULT_CONFIG
    for resolver in RESOLVERS:
        page = resolver(context, config)
        if page is not None:
            logger.debug("Page object resolved by %s", resolver.__name__)
            return page

    logger.warning("No Page object found in context, expression or request attributes")
    raise MissingPageObjectError()
