"""Entry point: `python -m launch_verifier.main` or the `launch-verifier` script."""

import asyncio
import signal

from loguru import logger

from config.settings import settings
from launch_verifier.api.server import build_api_server, serve_until
from launch_verifier.utils.logger import setup_logger


async def main() -> None:
    setup_logger(json_logs=settings.log_json)
    logger.info(f"Launch structure verifier on {settings.api_host}:{settings.api_port}")

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    await serve_until(build_api_server(), stop)
    logger.info("Shutdown complete")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
