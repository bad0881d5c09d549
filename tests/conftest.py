"""Shared fixtures for streamstats tests."""

import pytest

from streamstats.core.config import get_settings
from streamstats.models import Broadcast, Snapshot

from .helpers import snap


@pytest.fixture
def scenario_snapshots() -> list[Snapshot]:
    """Five captures six minutes apart: game A then game B."""
    return [
        snap(0, 10, "A", followers=100),
        snap(6, 20, "A", followers=102),
        snap(12, 15, "A", followers=105),
        snap(18, 30, "B", followers=106),
        snap(24, 40, "B", followers=110),
    ]


@pytest.fixture
def scenario(scenario_snapshots) -> Broadcast:
    return Broadcast.from_snapshots(scenario_snapshots)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
