"""Offset/limit pagination metadata and the paged response envelope."""

from paginator.core.exceptions import PageOutOfRange, PaginationError, SizeOutOfRange
from paginator.core.pagination import (
    DEFAULT_ORDER_BY,
    DEFAULT_SORT_BY,
    Pagination,
    Query,
    derive,
)
from paginator.core.response import PagedResponse, PaginationMeta, paginated

__all__ = [
    "DEFAULT_ORDER_BY",
    "DEFAULT_SORT_BY",
    "PageOutOfRange",
    "PagedResponse",
    "Pagination",
    "PaginationError",
    "PaginationMeta",
    "Query",
    "SizeOutOfRange",
    "derive",
    "paginated",
]
