from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from doghouse.application.errors import ApplicationError, ErrorKind
from doghouse.config import settings
from doghouse.infrastructure.logging import configure_logging, get_logger
from doghouse.interfaces.api.v1.router import api_router

logger = get_logger(__name__)

OPENAPI_DESCRIPTION = """
Dog catalog API.

- `GET /api/v1/dogs` lists dogs with `sortBy`, `direction`, `pageNumber` and `pageSize`.
- `POST /api/v1/dogs` creates a dog; names are unique, tail length and weight are non-negative.
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Service health and connectivity checks."},
    {"name": "dogs", "description": "Dog catalog listing and creation."},
]

STATUS_BY_KIND = {
    ErrorKind.null_input: status.HTTP_400_BAD_REQUEST,
    ErrorKind.invalid_argument: status.HTTP_400_BAD_REQUEST,
    ErrorKind.conflict: status.HTTP_409_CONFLICT,
    ErrorKind.store_failure: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    logger.info("app_startup", app_name=settings.app_name, version=settings.app_version)
    yield
    logger.info("app_shutdown", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=OPENAPI_DESCRIPTION,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)


@app.get("/")
def root():
    return {"message": f"{settings.app_name} is running"}


@app.exception_handler(ApplicationError)
async def handle_application_error(_: Request, exc: ApplicationError):
    return JSONResponse(
        status_code=STATUS_BY_KIND[exc.kind],
        content={"detail": str(exc), "error": exc.kind.value},
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation(_: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors()), "error": "invalid_request"},
    )


app.include_router(api_router)
