from __future__ import annotations

import matplotlib
import pytest

from shapley_value.games.bandwidth import BandwidthPlayer, BandwidthWorth
from shapley_value.model.agent import Agent
from shapley_value.model.group import Group

matplotlib.use("Agg")


@pytest.fixture
def taxi_agents() -> list[Agent]:
    return [Agent(6.0, "a"), Agent(12.0, "b"), Agent(42.0, "c")]


@pytest.fixture
def bandwidth_players() -> list[BandwidthPlayer]:
    return [
        BandwidthPlayer(100.0, "a"),
        BandwidthPlayer(200.0, "b"),
        BandwidthPlayer(300.0, "c"),
    ]


@pytest.fixture
def bandwidth_worth(bandwidth_players: list[BandwidthPlayer]) -> BandwidthWorth:
    return BandwidthWorth(Group(bandwidth_players), capacity=200.0)
