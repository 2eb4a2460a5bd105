"""Command-line entry point: list primes, draw a ruler, sort integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from .primes import sieve
from .ruler import render_ruler
from .sorting import (
    bubble_sort,
    insertion_sort,
    quick_sort,
    quick_sort_iterative,
    selection_sort,
    shell_sort,
)

_SORTERS: dict[str, Callable[[list[int]], list[int]]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "shell": shell_sort,
    "quick": quick_sort,
    "quick-iterative": quick_sort_iterative,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="algonotes", description="Small demonstrations of classic algorithms."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    primes = commands.add_parser("primes", help="list the primes from 0 to LIMIT")
    primes.add_argument("limit", type=int)

    ruler = commands.add_parser("ruler", help="draw a ruler by divide and conquer")
    ruler.add_argument("left", type=int)
    ruler.add_argument("right", type=int)
    ruler.add_argument("height", type=int)

    sort = commands.add_parser(
        "sort", help="sort integers given as arguments or read from standard input"
    )
    sort.add_argument(
        "--algorithm", "-a", choices=sorted(_SORTERS), default="bubble"
    )
    sort.add_argument("values", nargs="*", type=int)
    return parser


def _read_integers(parser: argparse.ArgumentParser) -> list[int]:
    words = sys.stdin.read().split()
    try:
        return [int(word) for word in words]
    except ValueError as exc:
        parser.error(f"invalid integer on standard input: {exc}")
        raise  # parser.error exits; keeps type checkers content


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "primes":
        print(" ".join(str(prime) for prime in sieve(args.limit)))
    elif args.command == "ruler":
        try:
            drawing = render_ruler(args.left, args.right, args.height)
        except ValueError as exc:
            parser.error(str(exc))
        sys.stdout.write(drawing)
    else:
        values = args.values if args.values else _read_integers(parser)
        ordered = _SORTERS[args.algorithm](values)
        print(" ".join(str(value) for value in ordered))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())