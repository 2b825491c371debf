from collections.abc import Sized
from typing import Iterable

from permgen.errors import SizeExceededError
from permgen.pgtypes import T


def working_sequence(
    elements: Iterable[T], max_size: int | None = None
) -> list[T]:
    """
    Copy ``elements`` into a fresh list owned by one enumeration.

    When ``max_size`` is given, sized inputs are measured before anything
    is copied so that an oversized request does no work at all.
    """
    try:
        iter(elements)
    except (TypeError, ValueError):
        raise TypeError("Elements must be iterable")
    if max_size is not None and isinstance(elements, Sized):
        _check_size(len(elements), max_size)
    items = list(elements)
    if max_size is not None:
        _check_size(len(items), max_size)
    return items


def _check_size(size: int, max_size: int) -> None:
    if size > max_size:
        raise SizeExceededError(
            f"too many elements: {size} (at most {max_size})"
        )
