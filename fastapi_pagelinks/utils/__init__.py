"""Query parameter helpers."""

from .query_params import Pageable, pageable_dependency, parse_pageable, parse_sort_param

__all__ = ["Pageable", "pageable_dependency", "parse_pageable", "parse_sort_param"]
