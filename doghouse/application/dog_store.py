from typing import Protocol

from doghouse.domain.dog import Dog


class DuplicateKeyError(Exception):
    """Raised by a store when inserting a dog whose name is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Dog with name {name!r} already exists")


class DogStore(Protocol):
    """Storage contract consumed by the dog service.

    Implementations own their locking/transaction discipline: `insert` must
    check name uniqueness and write atomically.
    """

    def list_all(self) -> list[Dog]: ...

    def count(self) -> int: ...

    def find_by_name(self, name: str) -> Dog | None: ...

    def insert(self, dog: Dog) -> None: ...
