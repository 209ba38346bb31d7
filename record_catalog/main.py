import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from record_catalog.api.routers import albums, counter, search, tracks
from record_catalog.core.config import settings
from record_catalog.core.db import engine
from record_catalog.core.logging import configure_logging
from record_catalog.domain.errors import AlbumNotFound, GatewayFailure, IngestFailure

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Record Catalog API", version="0.1.0")

app.include_router(albums.router, prefix="/albums", tags=["Albums"])
app.include_router(search.router, prefix="/albumsByName", tags=["Search"])
app.include_router(tracks.router, prefix="/tracks", tags=["Tracks"])
app.include_router(counter.router, prefix="/counter", tags=["Counter"])


@app.on_event("startup")
def log_startup():
    logger.info(
        "%s (%s) starting, album search database: %s",
        settings.APP_NAME,
        settings.ENV,
        engine.url.render_as_string(hide_password=True),
    )


@app.get("/healthz")
def health_check():
    """Simple health check endpoint"""
    return {"status": "ok"}


@app.exception_handler(AlbumNotFound)
async def album_not_found_handler(request: Request, exc: AlbumNotFound):
    return JSONResponse({"message": "album not found"}, status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(GatewayFailure)
async def gateway_failure_handler(request: Request, exc: GatewayFailure):
    logger.error("Album search failed for %r", exc.fragment, exc_info=exc)
    return JSONResponse(
        {"message": "album search failed"}, status_code=status.HTTP_503_SERVICE_UNAVAILABLE
    )


@app.exception_handler(IngestFailure)
async def ingest_failure_handler(request: Request, exc: IngestFailure):
    logger.error("Track ingest failed from %s", exc.source, exc_info=exc)
    return JSONResponse(
        {"message": "tracks unavailable"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


@app.exception_handler(RequestValidationError)
async def binding_failure_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected request body for %s %s: %s", request.method, request.url.path, exc.errors())
    return Response(status_code=status.HTTP_400_BAD_REQUEST)
