from fastapi import Depends
from sqlalchemy.orm import Session

from doghouse.application.dog_store import DogStore
from doghouse.infrastructure.db.session import get_db
from doghouse.infrastructure.stores.sql_store import SqlDogStore


def get_dog_store(db: Session = Depends(get_db)) -> DogStore:
    return SqlDogStore(db)
