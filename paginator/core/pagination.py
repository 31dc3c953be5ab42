"""Offset/limit pagination for list endpoints.

A caller decodes a ``Pagination`` from its request, counts the matching rows
in its own store, then asks for the ``Query`` to run:

    query = pagination.values(total_items)
    rows = fetch(offset=query.offset, limit=query.limit,
                 order_by=query.order_by, sort_by=query.sort_by)

``values`` never touches the data source. It either returns a fully
populated ``Query`` or raises ``SizeOutOfRange`` / ``PageOutOfRange``.
"""


import math

from pydantic import BaseModel

from paginator.core.exceptions import PageOutOfRange, SizeOutOfRange

DEFAULT_ORDER_BY = "created_at"
DEFAULT_SORT_BY = "DESC"


def default_str(value: str, default: str) -> str:
    """Return `default` when `value` is the empty string."""
    return value if value else default


class Query(BaseModel):
    """Offset/limit plus the navigation metadata derived from a request."""

    offset: int = 0
    limit: int = 0
    total_pages: int = 0
    order_by: str = ""
    sort_by: str = ""
    next_page: int = 0
    prev_page: int = 0

    model_config = {"frozen": True}


class Pagination(BaseModel):
    """Paging parameters as supplied by the caller (`page` is 1-based)."""

    page: int = 0
    size: int = 0
    order_by: str = ""
    sort_by: str = ""

    def normalized_page(self) -> int:
        # Non-positive pages are treated as the first page, not rejected.
        return self.page if self.page > 0 else 1

    def values(self, total_items: int) -> Query:
        """Validate against `total_items` and derive the query to run.

        An empty result set (`total_items == 0`) accepts any page and
        reports a single page.
        """
        page = self.normalized_page()
        if self.size <= 0:
            raise SizeOutOfRange()

        total_pages = math.ceil(total_items / self.size)
        if total_pages == 0:
            total_pages = 1
        if total_items > 0 and page > total_pages:
            raise PageOutOfRange()

        return Query(
            offset=(page - 1) * self.size,
            limit=self.size,
            total_pages=total_pages,
            order_by=default_str(self.order_by, DEFAULT_ORDER_BY),
            sort_by=default_str(self.sort_by, DEFAULT_SORT_BY),
            next_page=min(page + 1, total_pages),
            prev_page=max(page - 1, 1),
        )


def derive(request: Pagination, total_items: int) -> Query:
    """Function form of `Pagination.values`."""
    return request.values(total_items)
