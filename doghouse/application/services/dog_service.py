from collections.abc import Callable
from typing import Any, NamedTuple

from doghouse.application.dog_store import DogStore, DuplicateKeyError
from doghouse.application.errors import ConflictError, NullInputError, ValidationError
from doghouse.application.services.pagination_service import page_bounds
from doghouse.domain.dog import COLOR_MAX_LENGTH, MEASUREMENT_MAX, NAME_MAX_LENGTH, Dog
from doghouse.domain.sorting import SortAttribute, SortDirection
from doghouse.infrastructure.logging import get_logger
from doghouse.interfaces.api.v1.schemas.dog import DogCreate

logger = get_logger(__name__)

SORT_KEYS: dict[SortAttribute, Callable[[Dog], Any]] = {
    SortAttribute.name: lambda dog: dog.name,
    SortAttribute.color: lambda dog: dog.color,
    SortAttribute.tail_length: lambda dog: dog.tail_length,
    SortAttribute.weight: lambda dog: dog.weight,
}

_ATTRIBUTES_BY_LOWER = {attribute.value.lower(): attribute for attribute in SortAttribute}
_DIRECTIONS_BY_LOWER = {direction.value: direction for direction in SortDirection}


class DogPage(NamedTuple):
    items: list[Dog]
    total_count: int


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def resolve_sort_attribute(sort_by: str | None) -> SortAttribute:
    if _is_blank(sort_by):
        return SortAttribute.name
    attribute = _ATTRIBUTES_BY_LOWER.get(sort_by.strip().lower())
    if attribute is None:
        raise ValidationError(f"Unknown sort attribute: {sort_by}")
    return attribute


def resolve_sort_direction(direction: str | None) -> SortDirection:
    if _is_blank(direction):
        return SortDirection.asc
    resolved = _DIRECTIONS_BY_LOWER.get(direction.strip().lower())
    if resolved is None:
        raise ValidationError(f"Unknown sort direction: {direction}")
    return resolved


def list_dogs(
    store: DogStore,
    *,
    sort_by: str | None = None,
    direction: str | None = None,
    page_number: int = 1,
    page_size: int = 100,
) -> DogPage:
    attribute = resolve_sort_attribute(sort_by)
    resolved_direction = resolve_sort_direction(direction)
    start, stop = page_bounds(page_number, page_size)

    dogs = store.list_all()
    total_count = store.count()
    # sorted() is stable in both directions, so ties keep store order.
    ordered = sorted(dogs, key=SORT_KEYS[attribute], reverse=resolved_direction is SortDirection.desc)
    items = ordered[start:stop]
    logger.info(
        "dogs_listed",
        sort_by=attribute.value,
        direction=resolved_direction.value,
        page_number=page_number,
        page_size=page_size,
        returned=len(items),
        total_count=total_count,
    )
    return DogPage(items=items, total_count=total_count)


def validate_dog_payload(payload: DogCreate | None) -> None:
    if payload is None:
        raise NullInputError("Dog payload is required")

    errors = []
    if _is_blank(payload.name):
        errors.append("Name is required")
    elif len(payload.name) > NAME_MAX_LENGTH:
        errors.append(f"Name must be at most {NAME_MAX_LENGTH} characters")
    if len(payload.color) > COLOR_MAX_LENGTH:
        errors.append(f"color must be at most {COLOR_MAX_LENGTH} characters")
    for field, value in (("tailLength", payload.tail_length), ("weight", payload.weight)):
        if value < 0:
            errors.append(f"{field} must be non-negative")
        elif value > MEASUREMENT_MAX:
            errors.append(f"{field} must be at most {MEASUREMENT_MAX}")
    if errors:
        raise ValidationError(*errors)


def create_dog(store: DogStore, payload: DogCreate | None) -> Dog:
    try:
        validate_dog_payload(payload)
    except (NullInputError, ValidationError) as exc:
        logger.warning("dog_create_rejected", kind=exc.kind.value, reason=str(exc))
        raise

    dog = Dog(name=payload.name, color=payload.color, tail_length=payload.tail_length, weight=payload.weight)
    if store.find_by_name(dog.name) is not None:
        logger.warning("dog_create_rejected", kind=ConflictError.kind.value, name=dog.name)
        raise ConflictError("Dog with the same name already exists")
    try:
        store.insert(dog)
    except DuplicateKeyError as exc:
        logger.warning("dog_create_rejected", kind=ConflictError.kind.value, name=dog.name)
        raise ConflictError("Dog with the same name already exists") from exc

    logger.info("dog_created", name=dog.name, tail_length=dog.tail_length, weight=dog.weight)
    return dog
