from __future__ import annotations

from ..model.group import Group


class TaxiWorth:
    """Shared-taxi game: a group pays the fare of its farthest passenger.

    The worth of a group is the largest intrinsic contribution among its
    members, ``0.0`` for the empty group.
    """

    def value(self, group: Group) -> float:
        worth = 0.0
        for member in group:
            if member.contribution > worth:
                worth = member.contribution
        return worth
