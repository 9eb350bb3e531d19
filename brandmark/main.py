"""Entry point: serves the FastAPI app with uvicorn."""

from __future__ import annotations

import asyncio
import logging
import sys

import uvicorn

from brandmark.config import PORT
from brandmark.web.app import create_app
from brandmark.web.websocket import setup_ws_events

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("brandmark")


async def main() -> None:
    logger.info("Starting Brandmark logo engine on port %d...", PORT)

    # Forward pipeline events to WebSocket clients
    await setup_ws_events()

    uvicorn_config = uvicorn.Config(
        app=create_app(),
        host="0.0.0.0",
        port=PORT,
        log_level="info",
        access_log=False,
    )
    await uvicorn.Server(uvicorn_config).serve()


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
        sys.exit(0)


if __name__ == "__main__":
    run()
