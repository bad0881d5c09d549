"""Broadcast viewership analytics for periodically sampled live-stream channels."""

from .core.exceptions import InvalidArgumentError, InvalidStateError, StreamStatsError
from .models import Broadcast, BroadcastSummary, Snapshot

__all__ = [
    "Broadcast",
    "BroadcastSummary",
    "InvalidArgumentError",
    "InvalidStateError",
    "Snapshot",
    "StreamStatsError",
]
