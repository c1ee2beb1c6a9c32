from __future__ import annotations

from typing import Dict, Sequence

from ..model.agent import Agent
from ..model.group import Group
from ..model.worth import WorthLike, resolve_worth


def marginal_contributions(
    permutation: Sequence[Agent],
    worth: WorthLike,
) -> Dict[Agent, float]:
    """Marginal contribution of every agent for one fixed ordering.

    m_{p_i} = v({p_0, ..., p_i}) - v({p_0, ..., p_{i-1}})

    The coalition preceding position ``i`` is rebuilt with
    ``Group.prefix(i)`` rather than carried over from the previous step.
    """
    value = resolve_worth(worth)
    contributions: dict[Agent, float] = {}
    coalition = Group()

    for i, agent in enumerate(permutation):
        coalition.add(agent)
        if coalition.size() > 1:
            contributions[agent] = float(value(coalition)) - float(
                value(coalition.prefix(i))
            )
        else:
            contributions[agent] = float(value(coalition))

    return contributions
