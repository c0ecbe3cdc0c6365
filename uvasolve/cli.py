"""Command-line entry point: solve one judge problem from its input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from . import arithmetic, grids, numtheory, text

_SOLVERS: dict[str, Callable[[str], str]] = {
    "100": arithmetic.run_100,
    "10035": arithmetic.run_10035,
    "10055": arithmetic.run_10055,
    "10071": arithmetic.run_10071,
    "10170": arithmetic.run_10170,
    "10783": arithmetic.run_10783,
    "10812": arithmetic.run_10812,
    "11150": arithmetic.run_11150,
    "10642": arithmetic.run_10642,
    "10268": arithmetic.run_10268,
    "10056": arithmetic.run_10056,
    "10221": arithmetic.run_10221,
    "10242": arithmetic.run_10242,
    "10041": arithmetic.run_10041,
    "10057": arithmetic.run_10057,
    "10019": numtheory.run_10019,
    "10190": numtheory.run_10190,
    "10193": numtheory.run_10193,
    "10235": numtheory.run_10235,
    "10922": numtheory.run_10922,
    "10929": numtheory.run_10929,
    "10931": numtheory.run_10931,
    "11332": numtheory.run_11332,
    "11417": numtheory.run_11417,
    "11461": numtheory.run_11461,
    "948": numtheory.run_948,
    "10093": numtheory.run_10093,
    "10101": numtheory.run_10101,
    "11063": numtheory.run_11063,
    "11005": numtheory.run_11005,
    "10038": grids.run_10038,
    "10050": grids.run_10050,
    "10189": grids.run_10189,
    "10409": grids.run_10409,
    "10908": grids.run_10908,
    "11321": grids.run_11321,
    "11349": grids.run_11349,
    "118": grids.run_118,
    "12019": grids.run_12019,
    "299": grids.run_299,
    "10008": text.run_10008,
    "10062": text.run_10062,
    "10222": text.run_10222,
    "10226": text.run_10226,
    "10252": text.run_10252,
    "272": text.run_272,
    "490": text.run_490,
    "10420": text.run_10420,
    "10415": text.run_10415,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="uvasolve",
        description="Solve a judge problem, reading its input and printing its output.",
    )
    parser.add_argument(
        "problem",
        choices=sorted(_SOLVERS, key=int),
        help="problem number",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="input file; standard input when omitted",
    )
    args = parser.parse_args(argv)

    if args.input is None:
        data = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            data = handle.read()

    sys.stdout.write(_SOLVERS[args.problem](data))
    return 0