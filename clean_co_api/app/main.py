"""
Main entrypoint for the Clean Co API.

This module assembles the FastAPI application: logging, CORS, the
versioned routers and the error handlers that render every failure as
``{"message": ...}``.  The MongoDB client is opened in the lifespan
handler and closed on shutdown.  Run it with uvicorn, e.g.::

    uvicorn clean_co_api.app.main:app --reload

or through ``run.py``, which also loads a ``.env`` file first.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import create_client, ping
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate settings and connect to MongoDB before serving requests."""
    settings.validate()
    client = create_client(settings)
    try:
        await ping(client)
        app.state.mongo_client = client
        app.state.database = client[settings.database_name]
        logger.info("%s started", settings.project_name)
        yield
    finally:
        client.close()
        logger.info("%s shutting down", settings.project_name)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _describe_validation_error(error: dict) -> str:
    # loc starts with the request part ("query", "body", ...) then the field path
    path = [str(part) for part in error.get("loc", ())[1:]]
    field = ".".join(path) or "request"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": "; ".join(_describe_validation_error(e) for e in exc.errors())},
    )


async def storage_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """Storage errors are never retried; the caller gets a 500."""
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "storage failure"},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application.  The database is attached to
        ``app.state`` only once the lifespan handler runs.
    """
    # Logging first, so that everything imported below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api/v1")

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(PyMongoError, storage_error_handler)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "Clean Co Server is running"

    return app


app = create_app()
