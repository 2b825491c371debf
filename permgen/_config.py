"""Default algorithm selection.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_default_algorithm`.
    2. The ``PERMGEN_ALGORITHM`` environment variable.
    3. ``"std"``, the lexicographic reference generator.

Examples:
    Use Heap's algorithm from the shell::

        export PERMGEN_ALGORITHM=heap

    Or programmatically::

        import permgen
        permgen.set_default_algorithm("3")
        permgen.set_default_algorithm("auto")  # back to the default
"""

from __future__ import annotations

import logging
import os

from permgen.errors import UnknownAlgorithmError
from permgen.pgtypes import Algorithm

logger = logging.getLogger(__name__)

ENV_VAR = "PERMGEN_ALGORITHM"
_DEFAULT = Algorithm.REFERENCE

_algorithm_override: Algorithm | None = None


def get_default_algorithm() -> Algorithm:
    if _algorithm_override is not None:
        return _algorithm_override

    env = os.environ.get(ENV_VAR, "").strip()
    if env:
        try:
            return Algorithm.parse(env)
        except UnknownAlgorithmError:
            logger.warning("ignoring %s=%r: unknown algorithm", ENV_VAR, env)

    return _DEFAULT


def set_default_algorithm(name: str | Algorithm) -> None:
    """Override the default algorithm; ``"auto"`` restores the resolution order.

    Raises:
        UnknownAlgorithmError: If *name* is not a recognised selector.
    """
    global _algorithm_override
    if isinstance(name, str) and name.strip().lower() == "auto":
        _algorithm_override = None
        return
    _algorithm_override = Algorithm.parse(name)
