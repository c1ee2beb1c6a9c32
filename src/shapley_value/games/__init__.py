from __future__ import annotations

from typing import Any, Sequence

from ..model.agent import Agent
from ..model.group import Group
from ..model.worth import WorthFunction
from .bandwidth import BandwidthPlayer, BandwidthWorth
from .taxi import TaxiWorth

GAME_PARAMS: dict[str, frozenset[str]] = {
    "taxi": frozenset(),
    "bandwidth": frozenset({"capacity"}),
}
GAME_KINDS = tuple(GAME_PARAMS)


def build_worth(kind: str, agents: Sequence[Agent], **params: Any) -> WorthFunction:
    """Construct the worth function of a named example game."""
    kind_normalized = kind.lower()
    if kind_normalized not in GAME_PARAMS:
        msg = f"Unknown game kind: {kind} (expected one of {list(GAME_KINDS)})"
        raise ValueError(msg)

    unknown = sorted(set(params) - GAME_PARAMS[kind_normalized])
    if unknown:
        msg = f"Unknown parameters for the {kind_normalized} game: {unknown}"
        raise ValueError(msg)

    if kind_normalized == "taxi":
        return TaxiWorth()

    if "capacity" not in params:
        msg = "The bandwidth game requires a 'capacity' parameter."
        raise ValueError(msg)
    return BandwidthWorth(Group(agents), float(params["capacity"]))


__all__ = [
    "BandwidthPlayer",
    "BandwidthWorth",
    "GAME_KINDS",
    "GAME_PARAMS",
    "TaxiWorth",
    "build_worth",
]
