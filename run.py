"""Entry point for the Football API server.

Starts the FastAPI application under uvicorn.  Host, port, log level and
database location are read from the environment (see
``football_api/app/core/config.py``), e.g.::

    DATABASE_URL=/var/lib/football/football.db PORT=8080 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from football_api.app.core.config import settings
from football_api.app.main import app


async def run_api() -> None:
    """Serve the API until the process is interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Starting %s on %s:%s", settings.project_name, settings.host, settings.port)
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
