"""Jinja2 globals exposing the link builders to templates.

After ``install_pagination_globals(templates)`` a template rendered with a
``request`` and a ``page`` in its context can write::

    <a href="{{ page_url(page.number + 1) }}">Next</a>
    <a href="{{ sort_url('name') }}">Name</a>
    <a href="{{ page_size_url(50) }}">50 per page</a>
"""

from __future__ import annotations

import logging
from typing import Any

from jinja2 import Environment, pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from fastapi_pagelinks.core.config import DEFAULT_CONFIG, PaginationConfig
from fastapi_pagelinks.pagination import positions
from fastapi_pagelinks.pagination.links import PageLinkBuilder
from fastapi_pagelinks.pagination.resolvers import find_page
from fastapi_pagelinks.schemas.page import Direction, Page
from fastapi_pagelinks.web.context import JinjaTemplateContext

logger = logging.getLogger(__name__)


def _environment(target: Any) -> Environment:
    if isinstance(target, Environment):
        return target
    # starlette.templating.Jinja2Templates
    env = getattr(target, "env", None)
    if isinstance(env, Environment):
        return env
    raise TypeError(f"Expected a jinja2 Environment or Jinja2Templates, got {type(target).__name__}")


def build_globals(config: PaginationConfig | None = None) -> dict[str, Any]:
    """Return the template globals bound to ``config``."""
    config = config or DEFAULT_CONFIG

    def builder(context: Context, options: dict[str, Any]) -> PageLinkBuilder:
        return PageLinkBuilder(JinjaTemplateContext(context), config, **options)

    def resolve(context: Context, page: Page | None) -> Page:
        return page if page is not None else find_page(JinjaTemplateContext(context), config)

    def split_for(context: Context) -> int:
        split = context.get(config.split_key)
        if split is None:
            return config.default_split
        try:
            return int(split)
        except (TypeError, ValueError):
            logger.warning(
                "Ignoring invalid %s value %r, using %d", config.split_key, split, config.default_split
            )
            return config.default_split

    # Links are attribute-ready: the request part is escaped already and
    # callback links must keep their closing quote.
    # Keyword options win over context variables; {% with %} locals are not
    # visible to pass_context globals.
    @pass_context
    def page_url(
        context: Context,
        page_number: int,
        *,
        qualifier: str | None = None,
        url: str | None = None,
        js_function: str | None = None,
    ) -> Markup:
        options = {"qualifier": qualifier, "url": url, "js_function": js_function}
        return Markup(builder(context, options).page_url(page_number))

    @pass_context
    def sort_url(
        context: Context,
        field: str,
        direction: Direction | str | None = None,
        *,
        qualifier: str | None = None,
        url: str | None = None,
        js_function: str | None = None,
    ) -> Markup:
        options = {"qualifier": qualifier, "url": url, "js_function": js_function}
        return Markup(builder(context, options).sort_url(field, direction))

    @pass_context
    def page_size_url(
        context: Context,
        page_size: int,
        *,
        qualifier: str | None = None,
        url: str | None = None,
        js_function: str | None = None,
    ) -> Markup:
        options = {"qualifier": qualifier, "url": url, "js_function": js_function}
        return Markup(builder(context, options).page_size_url(page_size))

    @pass_context
    def find_page_global(context: Context) -> Page:
        return find_page(JinjaTemplateContext(context), config)

    @pass_context
    def first_item(context: Context, page: Page | None = None) -> int:
        return positions.get_first_item_in_page(resolve(context, page))

    @pass_context
    def last_item(context: Context, page: Page | None = None) -> int:
        return positions.get_latest_item_in_page(resolve(context, page))

    @pass_context
    def is_first_page(context: Context, page: Page | None = None) -> bool:
        return positions.is_first_page(resolve(context, page))

    @pass_context
    def is_last_page(context: Context, page: Page | None = None) -> bool:
        return positions.is_last_page(resolve(context, page))

    @pass_context
    def has_previous(context: Context, page: Page | None = None) -> bool:
        return positions.has_previous(resolve(context, page))

    @pass_context
    def has_next(context: Context, page: Page | None = None) -> bool:
        return positions.has_next(resolve(context, page))

    @pass_context
    def page_window(context: Context, page: Page | None = None) -> range:
        return positions.page_window(resolve(context, page), split_for(context))

    return {
        "page_url": page_url,
        "sort_url": sort_url,
        "page_size_url": page_size_url,
        "find_page": find_page_global,
        "first_item": first_item,
        "last_item": last_item,
        "is_first_page": is_first_page,
        "is_last_page": is_last_page,
        "has_previous": has_previous,
        "has_next": has_next,
        "page_window": page_window,
    }


def install_pagination_globals(target: Any, config: PaginationConfig | None = None) -> Environment:
    """Register the pagination globals on a Jinja2 environment.

    ``target`` may be a ``jinja2.Environment`` or a Starlette
    ``Jinja2Templates`` instance. Returns the environment.
    """
    env = _environment(target)
    env.globals.update(build_globals(config))
    logger.debug("Installed pagination globals on %r", env)
    return env
