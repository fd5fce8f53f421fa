"""Command-line entry point for a few of the drills."""

import argparse
import sys
from collections.abc import Sequence

from cdrills.basics import add, interest
from cdrills.decisions import calculate
from cdrills.integers import to_binary

_ARITY = {"add": 2, "interest": 3, "calc": 3, "binary": 1}


def build_parser() -> argparse.ArgumentParser:
    """Parser with one sub-command per drill."""
    parser = argparse.ArgumentParser(prog="cdrills", description="Small numeric drills.")
    commands = parser.add_subparsers(dest="command", required=True)

    add_cmd = commands.add_parser("add", help="add two integers")
    add_cmd.add_argument("values", nargs=2, metavar=("A", "B"))

    interest_cmd = commands.add_parser("interest", help="simple and compound interest")
    interest_cmd.add_argument(
        "values", nargs=3, metavar=("PRINCIPAL", "RATE", "TIME")
    )

    calc_cmd = commands.add_parser("calc", help="apply an operator to two integers")
    calc_cmd.add_argument("values", nargs=3, metavar=("A", "B", "OP"))

    binary_cmd = commands.add_parser("binary", help="binary digits of an integer")
    binary_cmd.add_argument("values", nargs=1, metavar=("N",))
    return parser


def run(command: str, values: Sequence[str]) -> str:
    """Run one drill on its textual arguments and return the text it shows."""
    if command not in _ARITY:
        raise ValueError(f"unknown command: {command}")
    if len(values) != _ARITY[command]:
        raise ValueError(f"{command} takes {_ARITY[command]} values, got {len(values)}")
    if command == "add":
        a, b = (int(v) for v in values)
        return f"Sum = {add(a, b)}"
    if command == "interest":
        principal, rate, time = (float(v) for v in values)
        return str(interest(principal, rate, time))
    if command == "calc":
        a, b, op = values
        return str(calculate(int(a), int(b), op))
    return to_binary(int(values[0]))


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line, run the drill and print its result."""
    args = build_parser().parse_args(argv)
    try:
        output = run(args.command, args.values)
    except (ValueError, ZeroDivisionError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())