"""Page resolution, link building and position helpers."""

from .links import (
    PageLinkBuilder,
    create_page_size_url,
    create_page_url,
    create_sort_url,
)
from .positions import (
    get_first_item_in_page,
    get_latest_item_in_page,
    has_next,
    has_previous,
    is_first_page,
    is_last_page,
    page_window,
)
from .resolvers import find_page

__all__ = [
    "PageLinkBuilder",
    "create_page_size_url",
    "create_page_url",
    "create_sort_url",
    "find_page",
    "get_first_item_in_page",
    "get_latest_item_in_page",
    "has_next",
    "has_previous",
    "is_first_page",
    "is_last_page",
    "page_window",
]
