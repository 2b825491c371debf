import logging
from collections.abc import Sized
from typing import Iterable

from permgen import heap, insertion, plain_changes, reference
from permgen._config import get_default_algorithm
from permgen.pgtypes import (
    Algorithm, ContextT, PermAllFunc, PermCallback, PermutationView, T
)

logger = logging.getLogger(__name__)

GENERATORS: dict[Algorithm, PermAllFunc] = {
    Algorithm.REFERENCE: reference.perm_all,
    Algorithm.INSERTION: insertion.perm_all,
    Algorithm.PLAIN_CHANGES: plain_changes.perm_all,
    Algorithm.HEAP: heap.perm_all,
    Algorithm.HEAP_ITERATIVE: heap.perm_all_iterative,
}


def get_generator(
    algorithm: Algorithm | str | PermAllFunc | None = None
) -> PermAllFunc:
    if algorithm is None:
        return GENERATORS[get_default_algorithm()]
    if callable(algorithm) and not isinstance(algorithm, Algorithm):
        return algorithm
    return GENERATORS[Algorithm.parse(algorithm)]


def perm_all(
    algorithm: Algorithm | str | PermAllFunc | None,
    elements: Iterable[T],
    callback: PermCallback[T, ContextT],
    context: ContextT | None = None
) -> bool:
    func = get_generator(algorithm)
    size = len(elements) if isinstance(elements, Sized) else "?"
    logger.debug(
        "enumerating %s elements with %s.%s", size,
        getattr(func, "__module__", "?"), getattr(func, "__qualname__", func)
    )
    completed = func(elements, callback, context)
    if completed is False:
        logger.debug("enumeration stopped by callback")
    return completed


def collect(
    algorithm: Algorithm | str | PermAllFunc | None,
    elements: Iterable[T]
) -> list[tuple[T, ...]]:
    r: list[tuple[T, ...]] = []

    def append(view: PermutationView[T], _context: object) -> None:
        r.append(view.copy())

    perm_all(algorithm, elements, append)
    logger.debug("collected %d permutations", len(r))
    return r


class _Tally:
    __slots__ = ("count",)

    def __init__(self):
        self.count = 0


def _increment(_view: PermutationView, tally: _Tally) -> None:
    tally.count += 1


def count_permutations(
    algorithm: Algorithm | str | PermAllFunc | None,
    elements: Iterable[T]
) -> int:
    tally = _Tally()
    perm_all(algorithm, elements, _increment, tally)
    logger.debug("counted %d permutations", tally.count)
    return tally.count
