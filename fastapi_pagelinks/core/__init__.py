"""Core constants, configuration and errors."""

from .config import DEFAULT_CONFIG, PaginationConfig
from .errors import (
    AmbiguousPageObjectError,
    InvalidPageObjectError,
    MissingPageObjectError,
    PaginationError,
    UnsupportedRequestEnvironmentError,
)

__all__ = [
    "DEFAULT_CONFIG",
    "PaginationConfig",
    "AmbiguousPageObjectError",
    "InvalidPageObjectError",
    "MissingPageObjectError",
    "PaginationError",
    "UnsupportedRequestEnvironmentError",
]
