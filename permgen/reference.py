"""
Lexicographic generation (Knuth, TAOCP 4A, 7.2.1.2, Algorithm L).

Used as the oracle for the other generators. Equal elements are merged:
each distinct arrangement is emitted once.
"""
from typing import Iterable

from permgen._sequence import working_sequence
from permgen.pgtypes import (
    STOP, ContextT, OrderedT, PermCallback, PermutationView
)


def next_permutation(a: list[OrderedT]) -> bool:
    """
    Rearrange ``a`` in place into its lexicographic successor.

    Returns False, leaving ``a`` sorted ascending, once ``a`` was the last
    (descending) arrangement.
    """
    i = len(a) - 1
    while i > 0 and not a[i - 1] < a[i]:
        i -= 1
    if i <= 0:
        a.reverse()
        return False
    j = len(a) - 1
    while not a[i - 1] < a[j]:
        j -= 1
    a[i - 1], a[j] = a[j], a[i - 1]
    a[i:] = reversed(a[i:])
    return True


def perm_all(
    elements: Iterable[OrderedT],
    callback: PermCallback[OrderedT, ContextT],
    context: ContextT | None = None
) -> bool:
    a = working_sequence(elements)
    a.sort()
    view = PermutationView(a)
    while True:
        if callback(view, context) is STOP:
            return False
        if not next_permutation(a):
            return True
