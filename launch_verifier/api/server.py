"""uvicorn wiring for the verifier API."""

from __future__ import annotations

import asyncio

import uvicorn
from loguru import logger

from config.settings import Settings, settings as default_settings


def build_api_server(settings: Settings | None = None) -> uvicorn.Server:
    """uvicorn server for the app; ``serve()`` runs on the caller's loop."""
    from launch_verifier.api.app import create_app

    settings = settings or default_settings
    config = uvicorn.Config(
        app=create_app(settings),
        host=settings.api_host,
        port=settings.api_port,
        log_level="warning",
        loop="none",
        lifespan="on",
    )
    return uvicorn.Server(config)


async def serve_until(server: uvicorn.Server, stop: asyncio.Event) -> None:
    """Serve until ``stop`` is set or the server exits on its own.

    Stopping goes through ``should_exit`` so uvicorn runs the app's lifespan
    shutdown (provider clients closed, cache sweeper cancelled).
    """
    serve_task = asyncio.create_task(server.serve())
    stop_task = asyncio.create_task(stop.wait())
    try:
        await asyncio.wait({serve_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
        if not serve_task.done():
            logger.info("[API] Stopping server")
            server.should_exit = True
        await serve_task
    finally:
        stop_task.cancel()
