from collections.abc import Iterator, Sequence
from enum import Enum
from typing import (
    Callable, Generic, Iterable, Protocol, TypeAlias, TypeVar, overload
)

from permgen.errors import UnknownAlgorithmError

T = TypeVar('T')
ContextT = TypeVar('ContextT')


class SupportsOrder(Protocol):
    def __lt__(self: T, other: T) -> bool:
        pass

    def __eq__(self: T, other: T) -> bool:
        pass


OrderedT = TypeVar('OrderedT', bound=SupportsOrder)


class Signal(Enum):
    CONTINUE = "continue"
    STOP = "stop"


STOP = Signal.STOP


class PermutationView(Sequence[T], Generic[T]):
    """
    Read-only window onto a generator's working sequence.

    Only valid for the duration of the callback it is handed to: the
    generator rearranges the underlying list as soon as the callback
    returns. Use ``copy()`` to keep a permutation.
    """

    __slots__ = ("_items",)

    def __init__(self, items: list[T]):
        self._items = items

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"PermutationView({tuple(self._items)!r})"

    def copy(self) -> tuple[T, ...]:
        return tuple(self._items)


PermCallback: TypeAlias = Callable[[PermutationView[T], ContextT], object]
PermAllFunc: TypeAlias = Callable[
    [Iterable[T], PermCallback, ContextT | None], bool
]


class Algorithm(Enum):
    # values are the selector tokens accepted on the command line
    REFERENCE = "std"
    INSERTION = "1"
    PLAIN_CHANGES = "2"
    HEAP = "3"
    HEAP_ITERATIVE = "4"

    @classmethod
    def parse(cls, token: "str | Algorithm") -> "Algorithm":
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise UnknownAlgorithmError(f"unknown algorithm {token!r}")
        key = token.strip().lower().replace("-", "_")
        for algorithm in cls:
            if key in (algorithm.value, algorithm.name.lower()):
                return algorithm
        raise UnknownAlgorithmError(f"unknown algorithm {token}")

    @classmethod
    def tokens(cls) -> tuple[str, ...]:
        return tuple(a.value for a in cls)
