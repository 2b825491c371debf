"""
Heap's algorithm: B. R. Heap, "Permutations by Interchanges",
The Computer Journal 6(3), 1963.

Both variants emit the same sequence of arrangements, each one swap away
from the previous.
"""
from typing import Iterable

from permgen._sequence import working_sequence
from permgen.pgtypes import STOP, ContextT, PermCallback, PermutationView, T


def _generate(
    k: int,
    a: list[T],
    view: PermutationView[T],
    callback: PermCallback[T, ContextT],
    context: ContextT | None
) -> bool:
    if k <= 1:
        return callback(view, context) is not STOP
    if not _generate(k - 1, a, view, callback, context):
        return False
    last = k - 1
    for i in range(last):
        # even k swaps the i-th position in, odd k always the first
        if k % 2 == 0:
            a[i], a[last] = a[last], a[i]
        else:
            a[0], a[last] = a[last], a[0]
        if not _generate(k - 1, a, view, callback, context):
            return False
    return True


def perm_all(
    elements: Iterable[T],
    callback: PermCallback[T, ContextT],
    context: ContextT | None = None
) -> bool:
    a = working_sequence(elements)
    return _generate(len(a), a, PermutationView(a), callback, context)


def perm_all_iterative(
    elements: Iterable[T],
    callback: PermCallback[T, ContextT],
    context: ContextT | None = None
) -> bool:
    a = working_sequence(elements)
    n = len(a)
    view = PermutationView(a)
    c = [0] * n
    if callback(view, context) is STOP:
        return False
    i = 1
    while i < n:
        if c[i] < i:
            if i % 2 == 0:
                a[0], a[i] = a[i], a[0]
            else:
                a[c[i]], a[i] = a[i], a[c[i]]
            if callback(view, context) is STOP:
                return False
            c[i] += 1
            i = 1
        else:
            c[i] = 0
            i += 1
    return True
