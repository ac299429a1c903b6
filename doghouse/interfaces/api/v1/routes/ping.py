from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from doghouse.application.services.health_service import get_service_status
from doghouse.infrastructure.db.session import get_db

router = APIRouter(tags=["health"])


@router.get("/ping")
def ping(db: Session = Depends(get_db)):
    return get_service_status(db=db)
