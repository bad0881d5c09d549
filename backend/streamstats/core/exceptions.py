"""Error types raised by the analytics engine."""


class StreamStatsError(Exception):
    """Base class for all streamstats errors."""


class InvalidStateError(StreamStatsError):
    """An object was constructed without its required founding data."""


class InvalidArgumentError(StreamStatsError, ValueError):
    """An argument was rejected before any state was changed."""
