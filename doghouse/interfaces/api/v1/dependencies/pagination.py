from fastapi import Query

from doghouse.config import settings
from doghouse.interfaces.api.v1.schemas.pagination import PaginationParams


def get_pagination_params(
    page_number: int = Query(default=1, ge=1, alias="pageNumber"),
    page_size: int | None = Query(default=None, ge=1, alias="pageSize"),
) -> PaginationParams:
    if page_size is None:
        page_size = settings.default_page_size
    return PaginationParams(page_number=page_number, page_size=page_size)
