from __future__ import annotations

from typing import Callable, Protocol, Union, runtime_checkable

from .group import Group


@runtime_checkable
class WorthFunction(Protocol):
    """Characteristic function of a cooperative game.

    ``value`` must be pure and total, the empty group included. The engine
    never inspects agents itself; everything it knows about the game comes
    through this call.
    """

    def value(self, group: Group) -> float:
        ...


WorthLike = Union[WorthFunction, Callable[[Group], float]]


def resolve_worth(worth: WorthLike) -> Callable[[Group], float]:
    if isinstance(worth, WorthFunction):
        return worth.value
    if callable(worth):
        return worth
    msg = f"Expected a WorthFunction or a callable, got {type(worth).__name__}."
    raise TypeError(msg)
