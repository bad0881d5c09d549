"""Point-in-time observation of a live channel."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime, timedelta
from typing import Any

from ..core.exceptions import InvalidArgumentError, InvalidStateError

ONE_MINUTE = timedelta(minutes=1)

# Sentinel default so that omitted members reach __post_init__
_MISSING: Any = object()


@dataclass(frozen=True, eq=False)
class Snapshot:
    """Viewer, follower and game state of a channel at one capture instant.

    Snapshots compare equal when they share ``(time, channel)`` and sort by
    ``time`` alone. The channel name is lowercased on construction.
    """

    channel: str = _MISSING
    time: datetime = _MISSING
    game: str = _MISSING
    viewers: int = _MISSING
    followers: int = _MISSING

    def __post_init__(self) -> None:
        missing = [
            f.name
            for f in fields(self)
            if getattr(self, f.name) is _MISSING or getattr(self, f.name) is None
        ]
        if missing:
            raise InvalidStateError(
                f"Snapshot must be created with all members, missing: {', '.join(missing)}"
            )
        if not isinstance(self.channel, str) or not isinstance(self.game, str):
            raise InvalidArgumentError(
                f"Snapshot channel and game must be strings "
                f"(channel={self.channel!r}, game={self.game!r})"
            )
        if not isinstance(self.time, datetime):
            raise InvalidArgumentError(f"Snapshot time must be a datetime, got {self.time!r}")
        for name in ("viewers", "followers"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"Snapshot {name} must be an int, got {value!r}")
        if self.viewers < 0 or self.followers < 0:
            raise InvalidArgumentError(
                f"Snapshot counts must be non-negative "
                f"(viewers={self.viewers}, followers={self.followers})"
            )
        object.__setattr__(self, "channel", self.channel.lower())

    @property
    def is_aware(self) -> bool:
        """Whether the capture time carries a timezone."""
        return self.time.tzinfo is not None and self.time.utcoffset() is not None

    def minutes_since(self, moment: datetime) -> int:
        """Whole minutes elapsed between ``moment`` and this capture."""
        return (self.time - moment) // ONE_MINUTE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self.time == other.time and self.channel == other.channel

    def __hash__(self) -> int:
        return hash((self.time, self.channel))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self.time < other.time

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self.time <= other.time

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self.time > other.time

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self.time >= other.time
