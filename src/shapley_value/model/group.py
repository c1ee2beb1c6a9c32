from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple

from .agent import Agent
from .errors import DuplicateMemberError, InvalidIndexError


class Group:
    """Duplicate-free, insertion-ordered collection of agent references.

    Membership is decided by identity. The insertion order only matters for
    :meth:`prefix`, which rebuilds "the coalition before position k" during
    the marginal contribution walk.
    """

    def __init__(self, members: Optional[Iterable[Agent]] = None) -> None:
        self._members: List[Agent] = []
        if members is not None:
            for agent in members:
                self.add(agent)

    def add(self, agent: Agent) -> None:
        if self.contains(agent):
            msg = f"Group already contains {agent!r}."
            raise DuplicateMemberError(msg)
        self._members.append(agent)

    def remove(self, agent: Agent) -> None:
        self._members = [m for m in self._members if m is not agent]

    def contains(self, agent: Agent) -> bool:
        return any(m is agent for m in self._members)

    def size(self) -> int:
        return len(self._members)

    def members(self) -> Tuple[Agent, ...]:
        return tuple(self._members)

    def prefix(self, k: int) -> "Group":
        """Return a new group holding the first ``k`` members."""
        if k < 0 or k > len(self._members):
            msg = f"Prefix length {k} outside [0, {len(self._members)}]."
            raise InvalidIndexError(msg)
        copy = Group()
        copy._members = self._members[:k]
        return copy

    def __contains__(self, agent: object) -> bool:
        return any(m is agent for m in self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Agent]:
        return iter(tuple(self._members))

    def __repr__(self) -> str:
        inner = ", ".join(str(m) for m in self._members)
        return "Group({" + inner + "})"
