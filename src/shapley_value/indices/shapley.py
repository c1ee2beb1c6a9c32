from __future__ import annotations

from typing import Dict, Sequence

from ..model.agent import Agent
from ..model.worth import WorthLike, resolve_worth
from ..utils.logging_utils import get_logger
from .marginal import marginal_contributions
from .permutations import iter_permutations

logger = get_logger(__name__)


def compute_shapley(agents: Sequence[Agent], worth: WorthLike) -> Dict[Agent, float]:
    """Exact Shapley values by enumerating every ordering of ``agents``.

    phi_i = (1 / n!) * sum over orderings of the marginal contribution of i

    ``agents`` must be duplicate-free. Cost is n! * n worth evaluations, so
    this is only practical for small games. Exceptions raised by ``worth``
    propagate and abort the enumeration.
    """
    players = list(agents)
    n = len(players)
    if n == 0:
        return {}

    value = resolve_worth(worth)
    indices: dict[Agent, float] = {a: 0.0 for a in players}

    num_permutations = 0
    for positions in iter_permutations(n):
        permutation = [players[p] for p in positions]
        contributions = marginal_contributions(permutation, value)
        for a in players:
            indices[a] += contributions[a]
        num_permutations += 1

    logger.debug(
        "Enumerated %d permutations of %d agents",
        num_permutations,
        n,
    )

    for a in players:
        indices[a] /= num_permutations

    return indices
