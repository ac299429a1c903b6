from dataclasses import asdict

from fastapi import APIRouter, Body, Depends, Query, status

from doghouse.application.dog_store import DogStore
from doghouse.application.services.dog_service import create_dog, list_dogs
from doghouse.application.services.pagination_service import build_pagination_meta
from doghouse.domain.dog import Dog
from doghouse.interfaces.api.v1.dependencies.pagination import get_pagination_params
from doghouse.interfaces.api.v1.dependencies.store import get_dog_store
from doghouse.interfaces.api.v1.schemas.dog import DogCreate, DogListResponse, DogResponse
from doghouse.interfaces.api.v1.schemas.pagination import PaginationParams

router = APIRouter(prefix="/dogs", tags=["dogs"])


def serialize_dog_response(dog: Dog) -> dict:
    return asdict(dog)


@router.get(
    "",
    response_model=DogListResponse,
    summary="List dogs",
    description="List dogs sorted by `sortBy` (name, color, tailLength, weight) in `direction` (asc, desc).",
    responses={400: {"description": "Unknown sort attribute, direction or invalid paging"}},
)
def get_dogs(
    sort_by: str | None = Query(default=None, alias="sortBy"),
    direction: str | None = Query(default=None),
    pagination: PaginationParams = Depends(get_pagination_params),
    store: DogStore = Depends(get_dog_store),
):
    page = list_dogs(
        store,
        sort_by=sort_by,
        direction=direction,
        page_number=pagination.page_number,
        page_size=pagination.page_size,
    )
    meta = build_pagination_meta(
        total_count=page.total_count,
        page_number=pagination.page_number,
        page_size=pagination.page_size,
    )
    return {"items": [serialize_dog_response(dog) for dog in page.items], "pagination": meta}


@router.post(
    "",
    response_model=DogResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create dog",
    description="Create a dog with a unique name and non-negative tail length and weight.",
    responses={400: {"description": "Missing body or invalid fields"}, 409: {"description": "Duplicate name"}},
)
def create_dog_endpoint(
    payload: DogCreate | None = Body(default=None),
    store: DogStore = Depends(get_dog_store),
):
    dog = create_dog(store, payload)
    return serialize_dog_response(dog)
