from doghouse.application.errors import ConflictError
from doghouse.application.services.dog_service import create_dog
from doghouse.infrastructure.db.session import SessionLocal
from doghouse.infrastructure.logging import configure_logging, get_logger
from doghouse.infrastructure.stores.sql_store import SqlDogStore
from doghouse.interfaces.api.v1.schemas.dog import DogCreate

logger = get_logger(__name__)

SAMPLE_DOGS = [
    DogCreate(name="Neo", color="red & amber", tail_length=22, weight=32),
    DogCreate(name="Jessy", color="black & white", tail_length=7, weight=14),
]


def create_dog_if_missing(store: SqlDogStore, payload: DogCreate) -> None:
    try:
        create_dog(store, payload)
    except ConflictError:
        logger.info("seed_dog_exists", name=payload.name)


def main() -> None:
    configure_logging()
    db = SessionLocal()
    try:
        store = SqlDogStore(db)
        for payload in SAMPLE_DOGS:
            create_dog_if_missing(store, payload)
        logger.info("seed_completed", dog_count=store.count())
    finally:
        db.close()


if __name__ == "__main__":
    main()
