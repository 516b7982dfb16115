"""Loguru sink configuration."""

import sys

from loguru import logger

from ..config import Settings


def configure_logging(settings: Settings) -> None:
    """Replace loguru's default sink with one at the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | {name} | {message}",
        backtrace=settings.is_development,
        diagnose=settings.is_development,
    )
    logger.debug(f"Logging configured at {settings.log_level} ({settings.NODE_ENV})")
