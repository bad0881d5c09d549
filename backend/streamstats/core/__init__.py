"""Core utilities: configuration, logging, errors."""

from .config import AnalyticsSettings, get_settings
from .exceptions import InvalidArgumentError, InvalidStateError, StreamStatsError
from .logging import setup_logging

__all__ = [
    "AnalyticsSettings",
    "InvalidArgumentError",
    "InvalidStateError",
    "StreamStatsError",
    "get_settings",
    "setup_logging",
]
