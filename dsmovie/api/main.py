"""
FastAPI application entry point for the DSMovie API.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dsmovie.api.config import (
    get_api_host, get_api_port, get_database_path, get_log_dir, get_log_level,
    get_seed_database,
)
from dsmovie.api.routers import movies, scores, system
from dsmovie.database.init_db import init_database
from dsmovie.services.exceptions import (
    DatabaseException, ResourceNotFoundException, UnauthorizedException
)
from dsmovie.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_api_logging(level=get_log_level(), log_dir=get_log_dir())
    logger.info("Starting DSMovie API")
    init_database(db_path=get_database_path(), seed=get_seed_database())
    yield


app = FastAPI(
    title="DSMovie API",
    description="REST API for browsing movies and rating them",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(scores.router)
app.include_router(system.router)


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": status_code,
            "error": message,
            "path": request.url.path,
        },
    )


@app.exception_handler(ResourceNotFoundException)
async def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    return error_response(request, status.HTTP_404_NOT_FOUND, str(exc))


@app.exception_handler(DatabaseException)
async def database_exception_handler(request: Request, exc: DatabaseException):
    return error_response(request, status.HTTP_409_CONFLICT, str(exc))


@app.exception_handler(UnauthorizedException)
async def unauthorized_handler(request: Request, exc: UnauthorizedException):
    return error_response(request, status.HTTP_401_UNAUTHORIZED, str(exc))


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "DSMovie API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
