"""Domain layer primitives (filters, nullable conversions, exceptions)."""

from . import exceptions, filters, nullable
from .filters import FilterSpec, ListQuery, PageSpec, TimeRange, build_list_query

__all__ = [
    "FilterSpec",
    "ListQuery",
    "PageSpec",
    "TimeRange",
    "build_list_query",
    "exceptions",
    "filters",
    "nullable",
]
