"""
Command-line front end.

    permgen [-c] [-a ALGORITHM] [-v] ELEMENT [ELEMENT ...]

Prints every permutation of the elements, one per line, or with ``-c``
only their number.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from permgen._config import get_default_algorithm
from permgen._logging import setup_logging, teardown_logging
from permgen.errors import PermgenError
from permgen.permgen_core import perm_all
from permgen.pgtypes import Algorithm, PermutationView

logger = logging.getLogger(__name__)


class _Output:
    __slots__ = ("stream", "count", "count_only")

    def __init__(self, stream: TextIO, count_only: bool):
        self.stream = stream
        self.count = 0
        self.count_only = count_only


def _output_each_perm(view: PermutationView[str], out: _Output) -> None:
    out.count += 1
    if not out.count_only:
        out.stream.write(" ".join(view))
        out.stream.write("\n")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="permgen",
        description="Print all permutations of the given elements.",
    )
    p.add_argument(
        "-c", "--count", action="store_true",
        help="Print the number of permutations only."
    )
    p.add_argument(
        "-a", "--algorithm", default=None,
        help=(
            "Permutation algorithm: "
            + ", ".join(Algorithm.tokens())
            + " or an algorithm name (default: $PERMGEN_ALGORITHM, else std)."
        ),
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output."
    )
    p.add_argument("elements", nargs="+", help="Elements to permute.")
    return p


def main(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING", stderr)
    try:
        return _run(args, stdout, stderr)
    finally:
        teardown_logging()


def _run(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    out = _Output(stdout, args.count)
    try:
        algorithm = (
            Algorithm.parse(args.algorithm) if args.algorithm is not None
            else get_default_algorithm()
        )
        logger.debug(
            "permuting %d elements with %s", len(args.elements), algorithm.name
        )
        perm_all(algorithm, args.elements, _output_each_perm, out)
    except PermgenError as e:
        logger.debug("failed: %s", e, exc_info=True)
        print(f"permgen: {e}", file=stderr)
        return 1

    if args.count:
        print(out.count, file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
