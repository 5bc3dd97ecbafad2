"""Tests for reading page, size and sort parameters."""

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from starlette.datastructures import QueryParams

from fastapi_pagelinks.schemas.page import Direction, Order
from fastapi_pagelinks.utils.query_params import (
    MAX_PAGE_SIZE,
    Pageable,
    pageable_dependency,
    parse_pageable,
    parse_sort_param,
)


class TestParseSortParam:
    def test_field_only(self):
        assert parse_sort_param("name") == [Order(field="name")]

    def test_field_and_direction(self):
        assert parse_sort_param("name,desc") == [Order(field="name", direction=Direction.DESC)]

    def test_direction_applies_to_all_fields(self):
        assert parse_sort_param("a, b ,DESC") == [
            Order(field="a", direction=Direction.DESC),
            Order(field="b", direction=Direction.DESC),
        ]

    def test_empty(self):
        assert parse_sort_param(" , ") == []


class TestParsePageable:
    def test_defaults(self):
        pageable = parse_pageable({})

        assert pageable == Pageable()
        assert pageable.size == 20

    def test_plain_mapping(self):
        pageable = parse_pageable({"page": "2", "size": "50", "sort": "name,desc"})

        assert pageable.page == 2
        assert pageable.size == 50
        assert pageable.offset == 100
        assert pageable.sort.get_order_for("name").is_descending

    def test_repeated_sort_parameters(self):
        pageable = parse_pageable(QueryParams("sort=name,desc&sort=price"))

        assert [(order.field, order.direction) for order in pageable.sort] == [
            ("name", Direction.DESC),
            ("price", Direction.ASC),
        ]

    def test_prefixed_parameters(self):
        params = QueryParams("page=9&users_page=1&users_size=5&users_sort=email")
        pageable = parse_pageable(params, prefix="users")

        assert (pageable.page, pageable.size) == (1, 5)
        assert pageable.sort.get_order_for("email") is not None

    def test_invalid_values_fall_back(self):
        pageable = parse_pageable({"page": "-3", "size": "abc"})

        assert (pageable.page, pageable.size) == (0, 20)

    def test_size_is_capped(self):
        assert parse_pageable({"size": "100000"}).size == MAX_PAGE_SIZE

    def test_to_page(self):
        pageable = parse_pageable({"page": "1", "size": "2", "sort": "name"})
        page = pageable.to_page(["c", "d"], total_elements=5)

        assert page.number == 1
        assert page.total_pages == 3
        assert page.sort == pageable.sort


def test_pageable_dependency():
    app = FastAPI()

    @app.get("/items")
    def items(pageable: Pageable = Depends(pageable_dependency(default_size=10))):
        return {"page": pageable.page, "size": pageable.size, "sort": [o.field for o in pageable.sort]}

    response = TestClient(app).get("/items?page=3&sort=name,asc")

    assert response.status_code == 200
    assert response.json() == {"page": 3, "size": 10, "sort": ["name"]}
