"""Report model for a single analysed broadcast."""

from datetime import datetime

from pydantic import BaseModel, Field


class BroadcastSummary(BaseModel):
    channel: str
    start: datetime
    end: datetime
    snapshot_count: int = Field(ge=1)
    length_minutes: int
    peak: int
    avg_viewers: int
    viewer_std_dev: int
    follower_delta: int
    peak_fifth_start: int
    game_sequence: list[str]
    avgs_by_game: list[int]
    subsequent_game_slopes: list[float] | None = Field(
        default=None, description="None when only one game was played"
    )
    ramp_up: int
