from collections.abc import Iterable
from threading import Lock

from doghouse.application.dog_store import DuplicateKeyError
from doghouse.domain.dog import Dog


class InMemoryDogStore:
    """Process-local store. Returns dogs in insertion order."""

    def __init__(self, dogs: Iterable[Dog] = ()) -> None:
        self._dogs: dict[str, Dog] = {}
        self._lock = Lock()
        for dog in dogs:
            self.insert(dog)

    def list_all(self) -> list[Dog]:
        with self._lock:
            return list(self._dogs.values())

    def count(self) -> int:
        with self._lock:
            return len(self._dogs)

    def find_by_name(self, name: str) -> Dog | None:
        with self._lock:
            return self._dogs.get(name)

    def insert(self, dog: Dog) -> None:
        with self._lock:
            if dog.name in self._dogs:
                raise DuplicateKeyError(dog.name)
            self._dogs[dog.name] = dog
