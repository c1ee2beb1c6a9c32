from __future__ import annotations

from dataclasses import dataclass

from ..model.agent import Agent
from ..model.group import Group


@dataclass(frozen=True, eq=False, repr=False)
class BandwidthPlayer(Agent):
    """A connection competing for a share of a link's bandwidth."""

    connection_id: int = 0
    node_id: int = 0

    @property
    def bandwidth_demand(self) -> float:
        return self.contribution


class BandwidthWorth:
    """Bankruptcy-style bandwidth game.

    A coalition is worth what is left of ``capacity``, if anything, once
    every player of ``all_players`` outside the coalition has received its
    full demand.
    """

    def __init__(self, all_players: Group, capacity: float) -> None:
        if capacity < 0:
            msg = f"capacity must be non-negative, got {capacity}."
            raise ValueError(msg)
        self.all_players = all_players
        self.capacity = float(capacity)

    def value(self, group: Group) -> float:
        outside_demand = 0.0
        for player in self.all_players:
            if not group.contains(player):
                outside_demand += player.contribution
        return max(0.0, self.capacity - outside_demand)
