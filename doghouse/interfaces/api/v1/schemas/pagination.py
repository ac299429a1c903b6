from doghouse.interfaces.api.v1.schemas.base import CamelModel


class PaginationParams(CamelModel):
    page_number: int = 1
    page_size: int = 100


class PaginationMeta(CamelModel):
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    has_next: bool
    has_prev: bool
