from doghouse.interfaces.api.v1.schemas.base import CamelModel
from doghouse.interfaces.api.v1.schemas.pagination import PaginationMeta


class DogCreate(CamelModel):
    # Field rules (required name, lengths, measurement range) are enforced by
    # the dog service, so the body model only checks types.
    name: str | None = None
    color: str = ""
    tail_length: int = 0
    weight: int = 0


class DogResponse(CamelModel):
    name: str
    color: str
    tail_length: int
    weight: int


class DogListResponse(CamelModel):
    items: list[DogResponse]
    pagination: PaginationMeta
