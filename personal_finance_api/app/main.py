"""
Main entrypoint for the Personal Finance API.

This module assembles the FastAPI application, sets up logging, CORS
and error handling, and includes the versioned routers.  The app is
instantiated at import time as ``app`` so it can be served directly::

    uvicorn personal_finance_api.app.main:app --reload

Importing the module does not touch the database.  The MongoDB client
is opened, the database seeded and the services wired in the startup
hook; a failure there aborts startup and the server exits.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from .api.v1.router import router as v1_router
from .core import db
from .core.config import settings
from .core.logging_config import setup_logging
from .seed import seed_database
from .services.registry import ServiceRegistry, build_mongo_services


logger = logging.getLogger(__name__)


def create_app(services: Optional[ServiceRegistry] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    services : Optional[ServiceRegistry]
        Pre-built services.  When given, no database connection is
        made and no seeding runs; tests use this to inject in-memory
        services.  When omitted, MongoDB-backed services are created
        at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.services = services
    app.state.mongo_client = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api/v1")

    @app.exception_handler(PyMongoError)
    async def database_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.services is not None:
            return
        client, database = await db.connect()
        app.state.mongo_client = client
        if settings.seed_on_startup:
            try:
                await seed_database(database)
            except Exception:
                logger.exception("Database seeding failed, aborting startup")
                await db.close(client)
                raise
        app.state.services = build_mongo_services(database)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.mongo_client is not None:
            await db.close(app.state.mongo_client)
            app.state.mongo_client = None

    return app


app = create_app()
