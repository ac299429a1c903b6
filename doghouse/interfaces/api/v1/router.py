from fastapi import APIRouter

from doghouse.interfaces.api.v1.routes.dogs import router as dogs_router
from doghouse.interfaces.api.v1.routes.ping import router as ping_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(dogs_router)
api_router.include_router(ping_router)
