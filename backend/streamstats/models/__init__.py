"""Data models for broadcast analytics."""

from .snapshot import Snapshot
from .summary import BroadcastSummary
from .broadcast import Broadcast

__all__ = [
    "Broadcast",
    "BroadcastSummary",
    "Snapshot",
]
