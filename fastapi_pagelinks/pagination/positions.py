"""Position helpers for rendering a page."""

from __future__ import annotations

from fastapi_pagelinks.core import keys
from fastapi_pagelinks.schemas.page import Page


def get_first_item_in_page(page: Page) -> int:
    """Return the 1-based ordinal of the first item on the page."""
    return page.size * page.number + 1


def get_latest_item_in_page(page: Page) -> int:
    """Return the 1-based ordinal of the last item on the page."""
    return page.size * page.number + page.number_of_elements


def is_first_page(page: Page) -> bool:
    # An empty result has no pages but still renders as the first one.
    if page.total_pages == 0:
        return True
    return page.is_first


def has_previous(page: Page) -> bool:
    return page.total_pages > 0 and page.has_previous


def is_last_page(page: Page) -> bool:
    if page.total_pages == 0:
        return True
    return page.is_last


def has_next(page: Page) -> bool:
    return page.total_pages > 0 and page.has_next


def page_window(page: Page, split: int = keys.DEFAULT_PAGINATION_SPLIT) -> range:
    """Return the zero-based page numbers to show as direct links.

    At most ``split`` pages are returned, centred on the current page and
    shifted to stay within ``[0, total_pages)``.
    """
    total = page.total_pages
    split = max(1, split)
    if total <= split:
        return range(total)

    start = max(0, page.number - split // 2)
    end = start + split
    if end > total:
        end = total
        start = end - split
    return range(start, end)
