from __future__ import annotations

from typing import Iterator, List, Optional, Sequence


def next_permutation(positions: Sequence[int]) -> Optional[List[int]]:
    """Return the lexicographic successor of ``positions``.

    Returns ``None`` when ``positions`` is already the last (non-increasing)
    ordering. The input is left untouched.
    """
    perm = list(positions)
    i = len(perm) - 2
    while i >= 0 and perm[i] >= perm[i + 1]:
        i -= 1
    if i < 0:
        return None

    j = len(perm) - 1
    while perm[j] <= perm[i]:
        j -= 1
    perm[i], perm[j] = perm[j], perm[i]
    perm[i + 1 :] = reversed(perm[i + 1 :])
    return perm


def iter_permutations(n: int) -> Iterator[List[int]]:
    """Yield all ``n!`` orderings of ``0..n-1`` in lexicographic order.

    Starts at the identity ordering and stops once the successor wraps
    around to it again. ``n == 0`` yields a single empty ordering.
    """
    if n < 0:
        msg = f"Number of positions must be non-negative, got {n}."
        raise ValueError(msg)

    current: Optional[List[int]] = list(range(n))
    while current is not None:
        yield current
        current = next_permutation(current)
