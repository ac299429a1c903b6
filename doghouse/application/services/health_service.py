from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from doghouse.config import settings


def get_service_status(db: Session) -> dict:
    db_connected = False
    try:
        db.execute(text("SELECT 1"))
        db_connected = True
    except SQLAlchemyError:
        db_connected = False

    return {
        "message": f"{settings.app_name}.Version{settings.app_version}",
        "db_connected": db_connected,
    }
