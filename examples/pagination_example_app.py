"""Example FastAPI app rendering a paginated, sortable table.

Run with:
    uvicorn examples.pagination_example_app:app --reload
"""
from __future__ import annotations

import os
import sys

from fastapi import Depends, FastAPI, Request
from fastapi.templating import Jinja2Templates
from jinja2 import DictLoader, Environment

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi_pagelinks import (  # noqa: E402
    Pageable,
    PaginationErrorMiddleware,
    install_pagination_globals,
    pageable_dependency,
)

BOOKS = [
    {"id": index, "title": f"Book {index:03d}", "price": (index * 37) % 90 + 10}
    for index in range(1, 128)
]

ITEMS_TEMPLATE = """
<table>
  <tr>
    <th><a href="{{ sort_url('title') }}">Title</a></th>
    <th><a href="{{ sort_url('price') }}">Price</a></th>
  </tr>
  {% for book in page.content %}
  <tr><td>{{ book.title }}</td><td>{{ book.price }}</td></tr>
  {% endfor %}
</table>
<p>Showing {{ first_item() }} to {{ last_item() }} of {{ page.total_elements }}</p>
<ul>
  {% if has_previous() %}<li><a href="{{ page_url(page.number - 1) }}">&laquo;</a></li>{% endif %}
  {% for number in page_window() %}
  <li><a href="{{ page_url(number) }}">{{ number + 1 }}</a></li>
  {% endfor %}
  {% if has_next() %}<li><a href="{{ page_url(page.number + 1) }}">&raquo;</a></li>{% endif %}
</ul>
<p>
  {% for size in (10, 20, 50) %}<a href="{{ page_size_url(size) }}">{{ size }}</a> {% endfor %}
</p>
"""

templates = Jinja2Templates(
    env=Environment(loader=DictLoader({"items.html": ITEMS_TEMPLATE}), autoescape=True)
)
install_pagination_globals(templates)

app = FastAPI(
    title="FastAPI pagination links example",
    description="Example app showcasing page, sort and page-size links.",
    version="0.1.0",
)
app.add_middleware(PaginationErrorMiddleware)


def sort_books(pageable: Pageable) -> list[dict]:
    books = list(BOOKS)
    for order in reversed(pageable.sort.orders):
        if order.field in {"id", "title", "price"}:
            books.sort(key=lambda book: book[order.field], reverse=order.is_descending)
    return books


@app.get("/books")
async def list_books(
    request: Request,
    pageable: Pageable = Depends(pageable_dependency(default_size=20)),
):
    books = sort_books(pageable)
    content = books[pageable.offset : pageable.offset + pageable.size]
    page = pageable.to_page(content, total_elements=len(books))
    return templates.TemplateResponse(request, "items.html", {"page": page})
