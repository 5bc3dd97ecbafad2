"""Page, sort and page-size link builders.

Every link starts from the URL of the current request, drops the parameters
that the link is about to set and appends the new one. When the context names
a JavaScript callback, links become an ``onclick`` handler instead.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable
from urllib.parse import quote_plus

from markupsafe import escape

from fastapi_pagelinks.core import keys
from fastapi_pagelinks.core.config import DEFAULT_CONFIG, PaginationConfig
from fastapi_pagelinks.core.errors import UnsupportedRequestEnvironmentError
from fastapi_pagelinks.schemas.page import Direction
from fastapi_pagelinks.web.context import TemplateContext
from fastapi_pagelinks.web.exchange import DEFAULT_PORTS, RequestURIWebRequest, WebRequest

from .resolvers import find_page

logger = logging.getLogger(__name__)


def get_request_uri(request: WebRequest) -> str:
    """Return the request URI, or assemble ``scheme://host[:port]path``."""
    if isinstance(request, RequestURIWebRequest):
        return request.request_uri

    scheme = request.scheme
    server_name = request.server_name
    server_port = request.server_port
    if scheme is None or server_name is None or server_port is None:
        raise UnsupportedRequestEnvironmentError()

    url = f"{scheme}://{server_name}"
    if DEFAULT_PORTS.get(scheme) != server_port:
        url += f":{server_port}"
    return url + request.request_path


def get_javascript_url(function_name: str, params: str) -> str:
    """Return ``javascript:void(0)" onclick="fn('params',this)``."""
    return "".join(
        (
            keys.JAVASCRIPT_VOID_0,
            keys.DOUBLE_QUOTE,
            keys.BLANK,
            keys.ONCLICK,
            keys.EQ,
            keys.DOUBLE_QUOTE,
            function_name,
            keys.PARENTHESIS_OPEN,
            keys.SINGLE_QUOTE,
            params,
            keys.SINGLE_QUOTE,
            keys.COMMA,
            keys.THIS,
            keys.PARENTHESIS_CLOSE,
        )
    )


class PageLinkBuilder:
    """Build pagination links for one rendering context.

    ``qualifier``, ``url`` and ``js_function`` take priority over the values
    bound in the context under the configured keys.
    """

    def __init__(
        self,
        context: TemplateContext,
        config: PaginationConfig | None = None,
        *,
        qualifier: str | None = None,
        url: str | None = None,
        js_function: str | None = None,
    ) -> None:
        self.context = context
        self.config = config or DEFAULT_CONFIG
        self.overrides = {
            self.config.qualifier_key: qualifier,
            self.config.url_key: url,
            self.config.js_function_key: js_function,
        }

    def get_option(self, key: str) -> Any:
        override = self.overrides.get(key)
        if override is not None:
            return override
        return self.context.get_variable(key)

    def js_function(self) -> str | None:
        value = self.get_option(self.config.js_function_key)
        return None if value is None else str(value)

    def param_prefix(self) -> str:
        """Return ``"<qualifier>_"`` when a qualifier is bound, else ``""``."""
        prefix = self.get_option(self.config.qualifier_key)
        if prefix is None:
            return keys.EMPTY
        return f"{prefix}{keys.UNDERSCORE}"

    def build_base_url(self, excluded: Iterable[str]) -> str:
        """Return the current URL without the ``excluded`` query parameters.

        A URL bound under the override key is returned as given. Without an
        override and without a request the base URL is empty.
        """
        url = self.get_option(self.config.url_key)
        exchange = self.context.exchange
        if url is not None or exchange is None:
            return keys.EMPTY if url is None else str(url)

        excluded = set(excluded)
        parts = [get_request_uri(exchange.request)]
        first_param = True
        for name, values in exchange.request.parameter_map().items():
            if name in excluded:
                continue
            parts.append(keys.Q_MARK if first_param else keys.AND)
            first_param = False
            # Values arrive decoded; re-encode so "&", "#" and "%" stay inside the value.
            encoded_name = quote_plus(name)
            parts.append(
                keys.AND.join(f"{encoded_name}{keys.EQ}{quote_plus(value)}" for value in values)
            )

        base_url = "".join(parts)
        logger.debug("Base URL %r built excluding %s", base_url, sorted(excluded))
        return str(escape(base_url))

    def build_url(self, base_url: str) -> str:
        """Return ``base_url`` followed by the right separator and the prefix."""
        appender = keys.AND if keys.Q_MARK in base_url else keys.Q_MARK
        return f"{base_url}{appender}{self.param_prefix()}"

    def _link(self, excluded: list[str], name: str, value: object) -> str:
        prefix = self.param_prefix()
        base_url = self.build_base_url([prefix + param for param in excluded])
        return f"{self.build_url(base_url)}{name}{keys.EQ}{value}"

    def page_url(self, page_number: int) -> str:
        """Return the link to ``page_number``."""
        param = self.config.page_param
        js_function = self.js_function()
        if js_function is not None:
            return get_javascript_url(js_function, f"{param}{keys.EQ}{page_number}")
        return self._link([param], param, page_number)

    def sort_token(self, field: str, forced_direction: Direction | str | None = None) -> str:
        """Return ``field``, ``field,asc`` or ``field,desc`` for the sort link.

        A forced direction always wins. Otherwise the direction already applied
        to ``field`` on the current page is flipped, and an unsorted field gets
        no direction at all.
        """
        if forced_direction is not None:
            if not isinstance(forced_direction, Direction):
                forced_direction = Direction.from_string(forced_direction)
            return f"{field}{keys.COMMA}{forced_direction.value.lower()}"

        page = find_page(self.context, self.config)
        previous = page.sort.get_order_for(field) if page.sort is not None else None
        if previous is not None:
            direction = Direction.DESC if previous.is_ascending else Direction.ASC
            return f"{field}{keys.COMMA}{direction.value.lower()}"
        return field

    def sort_url(self, field: str, forced_direction: Direction | str | None = None) -> str:
        """Return the link sorting by ``field``; changing sort resets the page."""
        param = self.config.sort_param
        token = self.sort_token(field, forced_direction)
        js_function = self.js_function()
        if js_function is not None:
            return get_javascript_url(js_function, f"{param}{keys.EQ}{token}")
        return self._link([param, self.config.page_param], param, token)

    def page_size_url(self, page_size: int) -> str:
        """Return the link changing the page size; the page number is dropped."""
        param = self.config.size_param
        js_function = self.js_function()
        if js_function is not None:
            return get_javascript_url(js_function, f"{param}{keys.EQ}{page_size}")
        return self._link([param, self.config.page_param], param, page_size)


def create_page_url(
    context: TemplateContext, page_number: int, config: PaginationConfig | None = None
) -> str:
    return PageLinkBuilder(context, config).page_url(page_number)


def create_sort_url(
    context: TemplateContext,
    field: str,
    forced_direction: Direction | str | None = None,
    config: PaginationConfig | None = None,
) -> str:
    return PageLinkBuilder(context, config).sort_url(field, forced_direction)


def create_page_size_url(
    context: TemplateContext, page_size: int, config: PaginationConfig | None = None
) -> str:
    return PageLinkBuilder(context, config).page_size_url(page_size)
