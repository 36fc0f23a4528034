"""Entry point for the Personal Finance API.

Serves the FastAPI application with Uvicorn.  Intended to be executed
from the project root, e.g. under Docker, where only a single Python
file is specified.

Configuration (connection string, database name, host and port) is read
from environment variables; see ``personal_finance_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from personal_finance_api.app.core.config import settings
from personal_finance_api.app.main import app


async def main() -> int:
    """Serve the API until interrupted.

    Returns a non-zero exit code if the application failed to start,
    for example because MongoDB is unreachable or seeding failed.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, lifespan="on", log_level="info")
    server = Server(config)
    await server.serve()
    if not server.started:
        logging.error("Personal Finance API failed to start")
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
