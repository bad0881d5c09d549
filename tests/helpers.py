"""Snapshot builders shared by the test modules."""

from datetime import datetime, timedelta

from streamstats.models import Snapshot

T0 = datetime(2024, 1, 1, 20, 0)


def snap(
    minute: float,
    viewers: int,
    game: str = "A",
    followers: int = 100,
    channel: str = "x",
) -> Snapshot:
    """Snapshot taken ``minute`` minutes after T0."""
    return Snapshot(
        channel=channel,
        time=T0 + timedelta(minutes=minute),
        game=game,
        viewers=viewers,
        followers=followers,
    )
