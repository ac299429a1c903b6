import pytest
from sqlalchemy.orm import sessionmaker

from doghouse.application.dog_store import DuplicateKeyError
from doghouse.application.errors import ConflictError, ErrorKind, StoreFailureError
from doghouse.application.services.dog_service import create_dog, list_dogs
from doghouse.infrastructure.db.session import build_engine
from doghouse.infrastructure.stores.sql_store import SqlDogStore
from doghouse.interfaces.api.v1.schemas.dog import DogCreate
from tests.helpers.factories import make_dog, persist_dog


class BlindLookupSqlStore(SqlDogStore):
    def find_by_name(self, name: str):
        return None


def test_sql_store_insert_and_read_back(db_session):
    """
    Validate the SQL store round-trips dogs.

    1. Insert a dog through the store.
    2. Read it back by name, through list_all and count.
    3. Validate every field is unchanged.
    """
    store = SqlDogStore(db_session)
    dog = make_dog("newdog", color="brown", tail_length=4, weight=8)
    store.insert(dog)

    assert store.find_by_name("newdog") == dog
    assert store.list_all() == [dog]
    assert store.count() == 1


def test_sql_store_returns_nothing_for_empty_catalog(db_session):
    store = SqlDogStore(db_session)
    assert store.list_all() == []
    assert store.count() == 0
    assert store.find_by_name("ghost") is None


def test_sql_store_insert_rejects_duplicate_name(db_session):
    """
    Validate the primary key rejects a duplicate name.

    1. Persist a dog named dup.
    2. Insert another dog with the same name through the store.
    3. Validate DuplicateKeyError is raised.
    4. Validate the session is usable and the count is unchanged.
    """
    persist_dog(db_session, "dup")
    store = SqlDogStore(db_session)

    with pytest.raises(DuplicateKeyError):
        store.insert(make_dog("dup", weight=50))

    assert store.count() == 1
    assert store.find_by_name("dup").weight == 1


def test_create_dog_maps_insert_time_duplicate_to_conflict(db_session):
    persist_dog(db_session, "dup")
    store = BlindLookupSqlStore(db_session)

    with pytest.raises(ConflictError):
        create_dog(store, DogCreate(name="dup", color="c", tail_length=1, weight=1))

    assert store.count() == 1


def test_sql_store_insert_detects_duplicate_when_lookup_is_bypassed(db_session):
    """
    Validate the insert-time duplicate check does not depend on find_by_name.

    1. Persist a dog named dup.
    2. Insert the same name through a store whose lookup sees nothing.
    3. Validate DuplicateKeyError is raised and the count is unchanged.
    """
    persist_dog(db_session, "dup")
    store = BlindLookupSqlStore(db_session)

    with pytest.raises(DuplicateKeyError):
        store.insert(make_dog("dup", weight=7))

    assert store.count() == 1


def test_service_against_sql_store_lists_sorted_pages(db_session):
    for i in range(25):
        persist_dog(db_session, f"dog-{i:02d}", tail_length=i, weight=i)
    store = SqlDogStore(db_session)

    items, total = list_dogs(store, sort_by="weight", direction="desc", page_number=3, page_size=10)

    assert total == 25
    assert [dog.weight for dog in items] == [4, 3, 2, 1, 0]


def test_sql_store_failure_is_categorized(tmp_path):
    """
    Validate database errors surface as StoreFailureError.

    1. Bind a store to a database without the dogs table.
    2. Call list_all, count and insert.
    3. Validate each raises StoreFailureError with the store_failure kind.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'empty.db'}")
    session = sessionmaker(bind=engine)()
    store = SqlDogStore(session)
    try:
        with pytest.raises(StoreFailureError) as exc:
            store.list_all()
        assert exc.value.kind is ErrorKind.store_failure
        with pytest.raises(StoreFailureError):
            store.count()
        with pytest.raises(StoreFailureError):
            store.insert(make_dog("orphan"))
    finally:
        session.close()
        engine.dispose()
