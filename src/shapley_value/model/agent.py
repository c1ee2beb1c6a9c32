from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, eq=False)
class Agent:
    """A participant of a cooperative game.

    Agents compare and hash by identity: two agents carrying the same
    ``contribution`` are still distinct participants and distinct keys in
    the value mappings produced by the engine.
    """

    contribution: float
    name: Optional[str] = None

    def __repr__(self) -> str:
        label = self.name if self.name is not None else hex(id(self))
        return f"{type(self).__name__}({label}, contribution={self.contribution})"

    def __str__(self) -> str:
        if self.name is not None:
            return self.name
        return repr(self)
