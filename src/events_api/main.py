import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from events_api.api.routes import router
from events_api.config import settings
from events_api.domain.errors import DomainError, ErrorCode
from events_api.infrastructure.repositories.event_repository import load_repository

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: 404,
    ErrorCode.SPOT_NOT_FOUND: 404,
    ErrorCode.SPOT_ALREADY_RESERVED: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    # CatalogLoadError propagates and aborts startup
    app.state.repository = load_repository(settings.data_file)
    logger.info("Reservation mode: %s", settings.reservation_mode.value)

    yield

    app.state.repository = None
    logger.info("Catalog released")


app = FastAPI(
    title="Events API",
    lifespan=lifespan,
)
app.include_router(router)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS.get(exc.code, 500),
        content={"detail": exc.message, "code": exc.code.value},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def run() -> None:
    """Serve the API until SIGINT or SIGTERM."""
    logger.info("Starting HTTP server on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )
    logger.info("HTTP server stopped")
