"""Command line entry point: solve one problem from standard input or a file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from contestkit import (
    april9,
    march19,
    march26_first,
    march26_second,
    nena20_first,
    nena20_second,
    nena20_third,
)

Solver = Callable[[str, str], str]


def _table(*parts: tuple[str, Solver]) -> dict[str, Solver]:
    return {letter: solver for letters, solver in parts for letter in letters}


_SOLVERS: dict[str, dict[str, Solver]] = {
    "april9": _table(("def", april9.run)),
    "march19": _table(("abcdeimr", march19.run)),
    "march26": _table(
        ("bcdfgijlm", march26_first.run),
        ("nopqrs", march26_second.run),
    ),
    "nena20": _table(
        ("abcdefg", nena20_first.run),
        ("hijklmn", nena20_second.run),
        ("opqr", nena20_third.run),
    ),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest problem for the given input."
    )
    parser.add_argument("contest", choices=sorted(_SOLVERS))
    parser.add_argument("problem", help="problem letter")
    parser.add_argument(
        "input", nargs="?", help="input file; standard input when omitted"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver chosen on the command line and print its answer."""
    parser = _parser()
    args = parser.parse_args(argv)
    problem = args.problem.lower()
    solver = _SOLVERS[args.contest].get(problem)
    if solver is None:
        parser.error(f"contest {args.contest} has no problem {args.problem!r}")
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        output = solver(problem, text)
    except (OSError, ValueError) as error:
        print(f"contestkit: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())