"""Pydantic models describing one page of a larger result set."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Sort direction."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Return the direction for ``asc``/``desc`` in any letter case."""
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(
                f"Invalid value '{value}' for orders given; has to be either 'desc' or 'asc'."
            ) from None

    @property
    def is_ascending(self) -> bool:
        return self is Direction.ASC

    @property
    def is_descending(self) -> bool:
        return self is Direction.DESC

    def opposite(self) -> "Direction":
        return Direction.DESC if self is Direction.ASC else Direction.ASC


class Order(BaseModel):
    """Sort instruction for a single field."""

    model_config = ConfigDict(frozen=True)

    field: str
    direction: Direction = Direction.ASC

    @property
    def is_ascending(self) -> bool:
        return self.direction.is_ascending

    @property
    def is_descending(self) -> bool:
        return self.direction.is_descending

    def with_direction(self, direction: Direction) -> "Order":
        return Order(field=self.field, direction=direction)

    def reverse(self) -> "Order":
        return self.with_direction(self.direction.opposite())


class Sort(BaseModel):
    """Ordered sequence of sort instructions."""

    model_config = ConfigDict(frozen=True)

    orders: List[Order] = Field(default_factory=list)

    @classmethod
    def by(cls, *fields: str, direction: Direction = Direction.ASC) -> "Sort":
        """Sort by the given fields, all in the same direction."""
        return cls(orders=[Order(field=name, direction=direction) for name in fields])

    @classmethod
    def unsorted(cls) -> "Sort":
        return cls()

    @property
    def is_sorted(self) -> bool:
        return bool(self.orders)

    def get_order_for(self, field: str) -> Optional[Order]:
        """Return the order registered for ``field``, if any."""
        for order in self.orders:
            if order.field == field:
                return order
        return None

    def __iter__(self) -> Iterator[Order]:  # type: ignore[override]
        return iter(self.orders)

    def __len__(self) -> int:
        return len(self.orders)


class Page(BaseModel):
    """A page of results: zero-based index, size, totals and sort.

    ``content`` holds only the items of the current page; ``total_elements``
    counts the whole result set.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: List[Any] = Field(default_factory=list)
    number: int = Field(default=0, ge=0)
    size: int = Field(default=0, ge=0)
    total_elements: int = Field(default=0, ge=0)
    sort: Sort = Field(default_factory=Sort)

    @property
    def total_pages(self) -> int:
        if self.size == 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def has_content(self) -> bool:
        return bool(self.content)

    @property
    def has_previous(self) -> bool:
        return self.number > 0

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next
