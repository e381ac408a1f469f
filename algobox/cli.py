"""Command line entry point: calculator, guessing game and butterfly pattern."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from algobox.arithmetic import calculate
from algobox.game import GuessGame
from algobox.patterns import butterfly


def _run_calc(args: argparse.Namespace) -> int:
    try:
        result = calculate(args.op, args.a, args.b)
    except ValueError:
        print("Error! operator is not correct")
        return 1
    except ZeroDivisionError:
        print("Error! division by zero")
        return 1
    print(f"{args.a:g} {args.op} {args.b:g} = {result:g}")
    return 0


def _run_guess(args: argparse.Namespace) -> int:
    game = GuessGame() if args.number is None else GuessGame(number=args.number)
    print(f"The random number is {game.number}")
    print("Guess the number between 1 to 100")
    print("guess in two attempt")
    while not game.solved:
        try:
            line = input()
        except EOFError:
            print("no more guesses", file=sys.stderr)
            return 1
        try:
            value = int(line)
        except ValueError:
            print("please enter a whole number")
            continue
        print(game.guess(value))
    return 0


def _run_butterfly(args: argparse.Namespace) -> int:
    print(butterfly(args.n), end="")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algobox", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="apply + - * / to two numbers")
    calc.add_argument("op")
    calc.add_argument("a", type=float)
    calc.add_argument("b", type=float)
    calc.set_defaults(handler=_run_calc)

    guess = commands.add_parser("guess", help="guess a number between 1 and 100")
    guess.add_argument("--number", type=int, default=None, help="the number to guess")
    guess.set_defaults(handler=_run_guess)

    pattern = commands.add_parser("butterfly", help="print a butterfly pattern")
    pattern.add_argument("n", type=int)
    pattern.set_defaults(handler=_run_butterfly)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command named in ``argv`` and return its exit status."""
    args = _build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())