from math import ceil

from doghouse.application.errors import ValidationError
from doghouse.interfaces.api.v1.schemas.pagination import PaginationMeta


def validate_page(page_number: int, page_size: int) -> None:
    errors = []
    if page_number < 1:
        errors.append("pageNumber must be at least 1")
    if page_size < 1:
        errors.append("pageSize must be at least 1")
    if errors:
        raise ValidationError(*errors)


def page_bounds(page_number: int, page_size: int) -> tuple[int, int]:
    validate_page(page_number, page_size)
    start = (page_number - 1) * page_size
    return start, start + page_size


def build_pagination_meta(*, total_count: int, page_number: int, page_size: int) -> PaginationMeta:
    validate_page(page_number, page_size)
    total_pages = ceil(total_count / page_size) if total_count > 0 else 0
    return PaginationMeta(
        page_number=page_number,
        page_size=page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_next=page_number < total_pages,
        has_prev=page_number > 1,
    )
