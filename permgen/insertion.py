"""
Generation by insertion (Knuth, TAOCP 1, 1.2.5, Method 1).

The permutations of n elements are built from those of the first n - 1 by
inserting the n-th element at every position. Each emitted permutation is
a new list, so this generator is not in-place.
"""
from typing import Iterable

from permgen._sequence import working_sequence
from permgen.pgtypes import STOP, ContextT, PermCallback, PermutationView, T


def _perm(
    items: list[T],
    callback: PermCallback[T, ContextT],
    context: ContextT | None
) -> bool:
    n = len(items)
    if n <= 1:
        return callback(PermutationView(items), context) is not STOP

    new_elem = items[-1]

    def insert_each(shorter: PermutationView[T], ctx: ContextT | None):
        for i in range(n):
            cur = [*shorter[:i], new_elem, *shorter[i:]]
            if callback(PermutationView(cur), ctx) is STOP:
                return STOP
        return None

    return _perm(items[:-1], insert_each, context)


def perm_all(
    elements: Iterable[T],
    callback: PermCallback[T, ContextT],
    context: ContextT | None = None
) -> bool:
    return _perm(working_sequence(elements), callback, context)
