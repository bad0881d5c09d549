"""Game sessionization of a time-ordered snapshot sequence."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.snapshot import Snapshot


@dataclass(frozen=True)
class GameSegment:
    """A maximal run of consecutive snapshots sharing one game label.

    ``start_index`` and ``stop_index`` delimit the run in the source
    sequence as a half-open range, so ``stop_index - start_index`` is the
    number of snapshots in the run.
    """

    game: str
    first: Snapshot
    last: Snapshot
    start_index: int
    stop_index: int

    @property
    def size(self) -> int:
        return self.stop_index - self.start_index


def split_by_game(snapshots: Sequence[Snapshot]) -> list[GameSegment]:
    """Partition ``snapshots`` into game segments, in encounter order."""
    segments: list[GameSegment] = []
    run_start = 0
    for i in range(1, len(snapshots) + 1):
        if i < len(snapshots) and snapshots[i].game == snapshots[run_start].game:
            continue
        segments.append(
            GameSegment(
                game=snapshots[run_start].game,
                first=snapshots[run_start],
                last=snapshots[i - 1],
                start_index=run_start,
                stop_index=i,
            )
        )
        run_start = i
    return segments
