from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from doghouse.application.dog_store import DuplicateKeyError
from doghouse.application.errors import StoreFailureError
from doghouse.domain.dog import Dog
from doghouse.infrastructure.db.models import DogRecord
from doghouse.infrastructure.logging import get_logger

logger = get_logger(__name__)


class SqlDogStore:
    """Dog store backed by the `dogs` table.

    Name uniqueness is enforced by the primary key, so two racing inserts of
    the same name cannot both commit.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def _fail(self, operation: str, exc: SQLAlchemyError) -> StoreFailureError:
        self.db.rollback()
        logger.error("dog_store_failure", operation=operation, error=str(exc))
        return StoreFailureError(f"Dog store unavailable during {operation}")

    def list_all(self) -> list[Dog]:
        try:
            records = self.db.execute(select(DogRecord)).scalars().all()
        except SQLAlchemyError as exc:
            raise self._fail("list_all", exc) from exc
        return [record.to_domain() for record in records]

    def count(self) -> int:
        try:
            return self.db.execute(select(func.count()).select_from(DogRecord)).scalar_one()
        except SQLAlchemyError as exc:
            raise self._fail("count", exc) from exc

    def find_by_name(self, name: str) -> Dog | None:
        try:
            record = self.db.execute(select(DogRecord).where(DogRecord.name == name)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._fail("find_by_name", exc) from exc
        return record.to_domain() if record is not None else None

    def _exists(self, name: str) -> bool:
        try:
            found = self.db.execute(select(DogRecord.name).where(DogRecord.name == name)).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._fail("insert", exc) from exc
        return found is not None

    def insert(self, dog: Dog) -> None:
        # Core insert keeps the primary key check in the database, not the identity map.
        statement = insert(DogRecord).values(
            name=dog.name,
            color=dog.color,
            tail_length=dog.tail_length,
            weight=dog.weight,
        )
        try:
            self.db.execute(statement)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if self._exists(dog.name):
                raise DuplicateKeyError(dog.name) from exc
            raise self._fail("insert", exc) from exc
        except SQLAlchemyError as exc:
            raise self._fail("insert", exc) from exc
