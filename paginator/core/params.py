"""FastAPI dependency that decodes `?page=&size=&order_by=&sort_by=`."""


from fastapi import Query

from paginator.core.config import settings
from paginator.core.pagination import Pagination


def pagination_params(
    page: int = Query(default=1, description="Page number (1-based, non-positive means 1)"),
    size: int | None = Query(default=None, description="Items per page"),
    order_by: str = Query(default="", description="Sort field (default created_at)"),
    sort_by: str = Query(default="", description="Sort direction (default DESC)"),
) -> Pagination:
    """Build a `Pagination` from query parameters.

    No range constraints are declared here: out-of-range values are left for
    `Pagination.values` to normalize or reject so every caller gets the same
    errors.
    """
    return Pagination(
        page=page,
        size=settings.default_page_size if size is None else size,
        order_by=order_by,
        sort_by=sort_by,
    )
