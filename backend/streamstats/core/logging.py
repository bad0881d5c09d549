"""Logging configuration"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import AnalyticsSettings, get_settings


def setup_logging(settings: AnalyticsSettings | None = None) -> None:
    """Configure application logging with Rich handler"""
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    console = Console(
        stderr=True,
        force_terminal=not settings.is_production,
        width=settings.console_width,
    )

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=True,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        tracebacks_width=settings.console_width,
    )

    rich_handler.setFormatter(
        logging.Formatter(fmt="%(message)s", datefmt="[%Y-%m-%d %H:%M:%S]")
    )

    # force=True: a host application may have configured the root logger already
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%Y-%m-%d %H:%M:%S]",
        handlers=[rich_handler],
        force=True,
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging: {settings.log_level} | Env: {settings.environment}")
