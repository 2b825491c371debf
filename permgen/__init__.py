from permgen._config import get_default_algorithm, set_default_algorithm
from permgen.errors import (
    PermgenError, SizeExceededError, UnknownAlgorithmError
)
from permgen.permgen_core import (
    collect, count_permutations, get_generator, perm_all
)
from permgen.pgtypes import STOP, Algorithm, PermutationView, Signal

__all__ = [
    "Algorithm",
    "PermutationView",
    "Signal",
    "STOP",
    "PermgenError",
    "SizeExceededError",
    "UnknownAlgorithmError",
    "collect",
    "count_permutations",
    "get_generator",
    "perm_all",
    "get_default_algorithm",
    "set_default_algorithm",
]
