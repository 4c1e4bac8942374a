"""Entry point for the Clean Co API server.

Loads a ``.env`` file from the working directory (ACCESS_TOKEN_SECRET,
DB_USER, DB_PASS, PORT, ...) and serves the FastAPI application with
Uvicorn.  Intended for hosts where you only specify a single Python
file to run.

Usage:
    python run.py
"""
import asyncio

from dotenv import load_dotenv
from uvicorn import Config, Server


async def serve() -> None:
    """Start the API using Uvicorn on ``settings.host:settings.port``."""
    # Settings are read at import time, so the environment must be
    # populated before the application package is imported.
    from clean_co_api.app.core.config import settings
    from clean_co_api.app.main import app

    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main() -> None:
    load_dotenv()
    asyncio.run(serve())


if __name__ == "__main__":
    main()
