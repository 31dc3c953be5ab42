"""Paged JSON response envelope: `{ pagination: {...}, data: ... }`"""


from typing import Generic, TypeVar

from pydantic import BaseModel

from paginator.core.pagination import Pagination, Query

T = TypeVar("T")


class PaginationMeta(BaseModel):
    page: int
    size: int
    total_pages: int
    total_items: int
    next_page: int
    prev_page: int
    order_by: str
    sort_by: str


class PagedResponse(BaseModel, Generic[T]):
    """Paginated list response envelope. Field names are part of the wire format."""

    pagination: PaginationMeta
    data: T


def paginated(request: Pagination, query: Query, total_items: int, data: T) -> PagedResponse[T]:
    """Wrap a fetched page of results with the metadata it was fetched with."""
    return PagedResponse(
        pagination=PaginationMeta(
            page=request.normalized_page(),
            size=query.limit,
            total_pages=query.total_pages,
            total_items=total_items,
            next_page=query.next_page,
            prev_page=query.prev_page,
            order_by=query.order_by,
            sort_by=query.sort_by,
        ),
        data=data,
    )
