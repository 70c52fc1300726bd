import logging
import os
import sys
from pathlib import Path

from loguru import logger

from config.settings import settings


def setup_logger(*, json_logs: bool = False, level: str | None = None) -> None:
    """Configure loguru sinks for the verifier process.

    Console level: explicit ``level``, else LOG_LEVEL env, else settings.
    The daily file sink keeps DEBUG so per-category fetch failures
    ([FACTS] / [HELIUS] / [ALCHEMY]) can be traced after the fact.
    """
    console_level = (level or os.getenv("LOG_LEVEL") or settings.log_level).upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(
            sys.stdout,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
                "<level>{message}</level>"
            ),
            level=console_level,
            colorize=True,
        )

    log_dir = Path(settings.log_dir)
    logger.add(
        log_dir / "verifier_{time:YYYY-MM-DD}.log",
        rotation="20 MB",
        retention="7 days",
        compression="gz",
        level="DEBUG",
        serialize=json_logs,
    )

    # httpx logs every RPC round-trip at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
