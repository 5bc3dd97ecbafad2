"""Pydantic schemas for pagination state."""

from .page import Direction, Order, Page, Sort

__all__ = [
    "Direction",
    "Order",
    "Page",
    "Sort",
]
