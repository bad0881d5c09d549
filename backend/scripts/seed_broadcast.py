"""Generate a random test broadcast and print its report"""

import argparse
import json
import logging
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Ensure backend/ is on sys.path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from streamstats.core import get_settings, setup_logging
from streamstats.models import Broadcast, Snapshot
from streamstats.services import ReportService

logger = logging.getLogger(__name__)

GAMES = [
    "Just Chatting",
    "League of Legends",
    "VALORANT",
    "Minecraft",
    "Apex Legends",
    "Grand Theft Auto V",
    "Fortnite",
    "Counter-Strike",
    "Dota 2",
    "Overwatch 2",
]


def generate_snapshots(
    channel: str,
    duration_minutes: int,
    interval_minutes: int = 6,
    max_games: int = 3,
    rng: random.Random | None = None,
) -> list[Snapshot]:
    """Build a plausible snapshot series: viewers ramp up, then drift per game"""
    rng = rng or random.Random()
    started_at = datetime.now().replace(second=0, microsecond=0) - timedelta(
        minutes=duration_minutes
    )
    games = rng.sample(GAMES, k=rng.randint(1, min(max_games, len(GAMES))))
    per_game = max(1, (duration_minutes // interval_minutes + 1) // len(games))

    viewers = rng.randint(20, 200)
    followers = rng.randint(1_000, 50_000)
    snapshots = []
    for i, minute in enumerate(range(0, duration_minutes + 1, interval_minutes)):
        game = games[min(i // per_game, len(games) - 1)]
        if minute < 30:
            viewers += rng.randint(0, 25)
        else:
            viewers = max(0, viewers + rng.randint(-15, 15))
        followers += rng.randint(0, 5)
        snapshots.append(
            Snapshot(
                channel=channel,
                time=started_at + timedelta(minutes=minute),
                game=game,
                viewers=viewers,
                followers=followers,
            )
        )
    return snapshots


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("channel", help="Channel name")
    parser.add_argument("--minutes", type=int, default=180, help="Broadcast length in minutes")
    parser.add_argument("--interval", type=int, default=6, help="Minutes between snapshots")
    parser.add_argument("--games", type=int, default=3, help="Maximum number of games played")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args(argv)

    if args.minutes < 0 or args.interval <= 0 or args.games <= 0:
        parser.error("--minutes must be >= 0, --interval and --games must be > 0")

    settings = get_settings()
    setup_logging(settings)

    snapshots = generate_snapshots(
        args.channel,
        args.minutes,
        interval_minutes=args.interval,
        max_games=args.games,
        rng=random.Random(args.seed),
    )
    broadcast = Broadcast.from_snapshots(snapshots)
    logger.info(f"Generated broadcast: {broadcast}")

    report = ReportService(settings).to_dict(broadcast)
    print(json.dumps(report, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
