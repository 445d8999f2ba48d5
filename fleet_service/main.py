import logging
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fleet_service.api.main import api_router
from fleet_service.core.config import config
from fleet_service.core.database import Base, engine
from fleet_service.core.exceptions import FleetError
from fleet_service.logging_config import configure_logging
from fleet_service.utils import first_error_message

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if config.CREATE_TABLES:
        try:
            Base.metadata.create_all(bind=engine)
            logger.info("database tables ensured")
        except Exception as e:
            logger.exception(f"Failed to create database tables: {str(e)}")
            raise
    yield
    engine.dispose()


app = FastAPI(
    title="fleet-service",
    summary="Fleet Service API",
    description="""
    CRUD over the satellites of a fleet, their beams and their transponders.
    Records are never removed: deleting one marks it as soft deleted, which hides it from every
    read and update and frees its unique names for reuse.
    """,
    lifespan=lifespan,
)

app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(FleetError)
async def fleet_error_handler(request: Request, exc: FleetError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
):
    message = first_error_message(exc.errors())
    logger.warning(f"{request.method} {request.url.path} invalid input: {message}")
    return JSONResponse(
        status_code=400,
        content={"error": f"The introduced values are not correct. Details: {message}"},
    )


app.include_router(api_router)


@app.get("/")
def root():
    return {"message": "Welcome to the Fleet Service API"}


@app.get("/ping")
def health_check():
    """Health check endpoint."""
    return {"status": "up"}
