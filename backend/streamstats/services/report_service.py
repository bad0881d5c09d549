"""Report service for analysed broadcasts"""

import logging
from collections.abc import Iterable

from ..core.config import AnalyticsSettings, get_settings
from ..models import Broadcast, BroadcastSummary

logger = logging.getLogger(__name__)


class ReportService:
    """Turn broadcasts into summaries using the configured report settings"""

    def __init__(self, settings: AnalyticsSettings | None = None):
        self.settings = settings or get_settings()

    def build(self, broadcast: Broadcast) -> BroadcastSummary:
        """Build the summary for one broadcast"""
        summary = broadcast.summary(slope_precision=self.settings.slope_precision)
        logger.debug(
            f"Summarised {summary.channel}: {summary.snapshot_count} snapshots, "
            f"{len(summary.game_sequence)} game segment(s)"
        )
        return summary

    def build_many(self, broadcasts: Iterable[Broadcast]) -> list[BroadcastSummary]:
        """Build summaries for independent broadcasts, ordered by start time"""
        summaries = [self.build(b) for b in broadcasts]
        summaries.sort(key=lambda s: s.start)
        logger.info(f"Built {len(summaries)} broadcast summaries")
        return summaries

    def to_dict(self, broadcast: Broadcast) -> dict:
        """Summary as a plain JSON-compatible dict"""
        return self.build(broadcast).model_dump(mode="json")
