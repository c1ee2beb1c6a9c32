from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Callable, Iterator, List, Mapping, Sequence

from ..model.agent import Agent
from ..model.group import Group
from ..model.worth import WorthLike, resolve_worth


@dataclass
class AxiomResult:
    name: str
    satisfied: bool
    detail: str = ""


def _subsets(agents: Sequence[Agent]) -> Iterator[tuple[Agent, ...]]:
    for k in range(len(agents) + 1):
        yield from combinations(agents, k)


def _with(subset: Sequence[Agent], agent: Agent) -> Group:
    group = Group(subset)
    group.add(agent)
    return group


def check_efficiency(
    values: Mapping[Agent, float],
    worth: WorthLike,
    agents: Sequence[Agent],
    tol: float = 1e-9,
) -> AxiomResult:
    """sum_i phi_i == v(N) - v(empty)."""
    value = resolve_worth(worth)
    total = sum(values[a] for a in agents)
    expected = float(value(Group(agents))) - float(value(Group()))
    satisfied = abs(total - expected) <= tol
    return AxiomResult(
        name="efficiency",
        satisfied=satisfied,
        detail=f"sum={total:.12g} expected={expected:.12g}",
    )


def check_symmetry(
    values: Mapping[Agent, float],
    worth: WorthLike,
    agents: Sequence[Agent],
    tol: float = 1e-9,
) -> AxiomResult:
    """Interchangeable agents must receive the same value."""
    value = resolve_worth(worth)
    violations: list[str] = []

    for i, j in combinations(agents, 2):
        others = [a for a in agents if a is not i and a is not j]
        if not _interchangeable(value, i, j, others, tol):
            continue
        if abs(values[i] - values[j]) > tol:
            violations.append(f"{i}~{j}")

    return AxiomResult(
        name="symmetry",
        satisfied=not violations,
        detail=",".join(violations),
    )


def check_null_player(
    values: Mapping[Agent, float],
    worth: WorthLike,
    agents: Sequence[Agent],
    tol: float = 1e-9,
) -> AxiomResult:
    """Agents that never change a coalition's worth must receive zero."""
    value = resolve_worth(worth)
    violations: list[str] = []

    for i in agents:
        others = [a for a in agents if a is not i]
        is_null = all(
            abs(float(value(_with(s, i))) - float(value(Group(s)))) <= tol
            for s in _subsets(others)
        )
        if is_null and abs(values[i]) > tol:
            violations.append(str(i))

    return AxiomResult(
        name="null_player",
        satisfied=not violations,
        detail=",".join(violations),
    )


def check_axioms(
    values: Mapping[Agent, float],
    worth: WorthLike,
    agents: Sequence[Agent],
    tol: float = 1e-9,
) -> List[AxiomResult]:
    return [
        check_efficiency(values, worth, agents, tol),
        check_symmetry(values, worth, agents, tol),
        check_null_player(values, worth, agents, tol),
    ]


def _interchangeable(
    value: Callable[[Group], float],
    i: Agent,
    j: Agent,
    others: Sequence[Agent],
    tol: float,
) -> bool:
    for s in _subsets(others):
        if abs(float(value(_with(s, i))) - float(value(_with(s, j)))) > tol:
            return False
    return True
