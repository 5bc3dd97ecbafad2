"""Middleware for pagination-aware apps."""

from .error_handler import PaginationErrorMiddleware

__all__ = ["PaginationErrorMiddleware"]
