"""A continuous broadcast and the performance metrics derived from it."""

from __future__ import annotations

import logging
import math
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from datetime import datetime
from operator import attrgetter

from cachetools import LRUCache, cachedmethod

from ..analytics.regression import slope
from ..analytics.segments import GameSegment, split_by_game
from ..analytics.windows import peak_window_start
from ..core.exceptions import InvalidArgumentError, InvalidStateError
from .snapshot import ONE_MINUTE, Snapshot
from .summary import BroadcastSummary

logger = logging.getLogger(__name__)

# Broadcasts at or under this length report the final viewer count as ramp-up
SHORT_BROADCAST_MINUTES = 30
RAMP_UP_MINUTES = 29

_time_key = attrgetter("time")


class Broadcast:
    """Ordered set of snapshots for one channel's continuous broadcast.

    A broadcast is never empty. ``peak`` and the viewer sum are maintained
    on every insertion; everything else is computed from the ordered
    snapshots on demand. Not safe for concurrent mutation.
    """

    def __init__(self, first: Snapshot | None = None) -> None:
        if first is None:
            raise InvalidStateError("Broadcasts must be instantiated with a first Snapshot.")
        if not isinstance(first, Snapshot):
            raise InvalidArgumentError(f"Expected a Snapshot, got {type(first).__name__}")

        self._snapshots: list[Snapshot] = [first]
        self._peak = first.viewers
        self._viewer_sum = first.viewers
        self._cache: LRUCache = LRUCache(maxsize=4)

    @classmethod
    def from_snapshots(cls, snapshots: Iterable[Snapshot]) -> Broadcast:
        """Build a broadcast from snapshots in any order."""
        it = iter(snapshots)
        first = next(it, None)
        if first is None:
            raise InvalidStateError("Cannot build a Broadcast from zero snapshots.")
        broadcast = cls(first)
        for ss in it:
            broadcast.add_snapshot(ss)
        return broadcast

    # ==================== Mutation ====================

    def add_snapshot(self, ss: Snapshot) -> None:
        """Insert a snapshot in time order.

        A snapshot whose capture time is already present is ignored.
        """
        if not isinstance(ss, Snapshot):
            raise InvalidArgumentError(f"Expected a Snapshot, got {type(ss).__name__}")
        if ss.channel != self.channel:
            logger.warning(
                f"Rejected snapshot for '{ss.channel}' in broadcast of '{self.channel}'"
            )
            raise InvalidArgumentError("All snapshots in a Broadcast must have the same channel.")
        if ss.is_aware != self._snapshots[0].is_aware:
            logger.warning(
                f"Rejected snapshot at {ss.time}: timezone awareness differs from {self.start}"
            )
            raise InvalidArgumentError(
                "Snapshot times in a Broadcast must be all naive or all timezone-aware."
            )

        idx = bisect_left(self._snapshots, ss.time, key=_time_key)
        if idx < len(self._snapshots) and self._snapshots[idx].time == ss.time:
            logger.debug(f"Ignoring duplicate snapshot for {ss.channel} at {ss.time}")
            return

        self._snapshots.insert(idx, ss)
        if ss.viewers > self._peak:
            self._peak = ss.viewers
        self._viewer_sum += ss.viewers
        self._cache.clear()

    # ==================== Accessors ====================

    @property
    def channel(self) -> str:
        return self._snapshots[0].channel

    @property
    def start(self) -> datetime:
        return self._snapshots[0].time

    @property
    def end(self) -> datetime:
        return self._snapshots[-1].time

    @property
    def peak(self) -> int:
        return self._peak

    @property
    def viewer_sum(self) -> int:
        return self._viewer_sum

    @property
    def count(self) -> int:
        return len(self._snapshots)

    @property
    def snapshots(self) -> tuple[Snapshot, ...]:
        return tuple(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._snapshots)

    # ==================== Metrics ====================

    def length(self) -> int:
        """Broadcast length in minutes.

        The span between first and last capture is padded by the average
        capture interval, since the stream keeps running for roughly one
        interval after the last snapshot.
        """
        if len(self._snapshots) < 2:
            return 0
        raw = (self.end - self.start) // ONE_MINUTE
        return raw + raw // (len(self._snapshots) - 1)

    def avg_viewers(self) -> int:
        return self._viewer_sum // len(self._snapshots)

    def follower_delta(self) -> int:
        """Followers gained (or lost, when negative) during the broadcast."""
        return self._snapshots[-1].followers - self._snapshots[0].followers

    def same_stream_viewer_variance(self) -> int:
        """Population standard deviation of viewer counts, truncated to an int."""
        mean = self.avg_viewers()
        sq_sum = sum((ss.viewers - mean) ** 2 for ss in self._snapshots)
        return math.isqrt(sq_sum // len(self._snapshots))

    def peak_fifth_start(self) -> int:
        """Start of the highest-viewership fifth, as a percentage of the broadcast."""
        return peak_window_start([ss.viewers for ss in self._snapshots])

    @cachedmethod(attrgetter("_cache"))
    def game_segments(self) -> tuple[GameSegment, ...]:
        """Runs of consecutive snapshots sharing a game, in broadcast order."""
        return tuple(split_by_game(self._snapshots))

    def avgs_by_game(self) -> list[int]:
        """Average viewers of each game segment, including the opening one."""
        return [
            sum(ss.viewers for ss in self._snapshots[seg.start_index : seg.stop_index]) // seg.size
            for seg in self.game_segments()
        ]

    def subsequent_game_slopes(self) -> list[float] | None:
        """Viewer trend (viewers per minute) of every game after the first.

        Returns ``None`` when only one game was played.
        """
        segments = self.game_segments()
        if len(segments) == 1:
            return None

        slopes = []
        for seg in segments[1:]:
            points = self._snapshots[seg.start_index : seg.stop_index]
            if len(points) < 2:
                slopes.append(0.0)
                continue
            minutes = [ss.minutes_since(seg.first.time) for ss in points]
            slopes.append(slope(minutes, [ss.viewers for ss in points]))
        return slopes

    def ramp_up(self) -> int:
        """Viewer count at the first capture past the 29 minute mark.

        Short broadcasts report their final viewer count instead. Returns 0
        when no capture falls past the mark.
        """
        if self.length() <= SHORT_BROADCAST_MINUTES:
            return self._snapshots[-1].viewers

        for ss in self._snapshots:
            if ss.minutes_since(self.start) > RAMP_UP_MINUTES:
                return ss.viewers
        return 0

    # ==================== Reporting ====================

    def summary(self, slope_precision: int | None = None) -> BroadcastSummary:
        """Collect every metric into a serialisable report."""
        slopes = self.subsequent_game_slopes()
        if slopes is not None and slope_precision is not None:
            slopes = [round(s, slope_precision) for s in slopes]

        return BroadcastSummary(
            channel=self.channel,
            start=self.start,
            end=self.end,
            snapshot_count=len(self._snapshots),
            length_minutes=self.length(),
            peak=self._peak,
            avg_viewers=self.avg_viewers(),
            viewer_std_dev=self.same_stream_viewer_variance(),
            follower_delta=self.follower_delta(),
            peak_fifth_start=self.peak_fifth_start(),
            game_sequence=[seg.game for seg in self.game_segments()],
            avgs_by_game=self.avgs_by_game(),
            subsequent_game_slopes=slopes,
            ramp_up=self.ramp_up(),
        )

    def __str__(self) -> str:
        return f"{self.channel}, {self.start}, {self.end}, {self.length()}, {self.avg_viewers()}"

    def __repr__(self) -> str:
        return f"<Broadcast channel={self.channel!r} snapshots={len(self._snapshots)}>"
