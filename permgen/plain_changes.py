"""
Plain changes (Knuth, TAOCP 4A, 7.2.1.2, Algorithm P).

Successive permutations differ by a single swap of two adjacent positions.
"""
from typing import Iterable

from permgen._sequence import working_sequence
from permgen.pgtypes import STOP, ContextT, PermCallback, PermutationView, T

# offset counters are signed 32-bit
COUNTER_MAX = 2 ** 31 - 1


def perm_all(
    elements: Iterable[T],
    callback: PermCallback[T, ContextT],
    context: ContextT | None = None
) -> bool:
    a = working_sequence(elements, max_size=COUNTER_MAX)
    n = len(a)
    view = PermutationView(a)
    if n == 0:
        return callback(view, context) is not STOP

    c = [0] * n
    o = [1] * n
    while True:
        if callback(view, context) is STOP:
            return False
        s = 0
        j = n - 1
        while True:
            q = c[j] + o[j]
            if q >= 0:
                if q != j + 1:
                    x, y = j - c[j] + s, j - q + s
                    a[x], a[y] = a[y], a[x]
                    c[j] = q
                    break
                if j == 0:
                    return True
                s += 1
            o[j] = -o[j]
            j -= 1
