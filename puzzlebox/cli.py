"""Command line front end for the puzzles."""

import argparse

from puzzlebox.array_sum import min_clues
from puzzlebox.meteo import expected_note_day


def _build_parser():
    parser = argparse.ArgumentParser(prog="puzzlebox", description="Solve small puzzles.")
    commands = parser.add_subparsers(dest="command", required=True)

    array_sum = commands.add_parser(
        "array-sum", help="can known range sums give an array's total?"
    )
    array_sum.add_argument("length", type=int, help="the array's length")
    array_sum.add_argument(
        "bounds", type=int, nargs="*", help="clue ranges as pairs: FIRST LAST ..."
    )

    meteo = commands.add_parser("meteo", help="day of the missed weekly note")
    meteo.add_argument("today", type=int, help="today's day of the month")
    meteo.add_argument("last_note", type=int, help="day of the last note")
    return parser


def main(argv=None):
    """Run the puzzle named on the command line and print its answer."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "array-sum":
        if len(args.bounds) % 2:
            parser.error("clue bounds must come in pairs")
        clues = list(zip(args.bounds[::2], args.bounds[1::2]))
        count = min_clues(clues, args.length)
        if count is None:
            print("No, it's impossible.")
        else:
            print("Yes")
            print(f"The {count} number of clues is needed.")
    else:
        day = expected_note_day(args.today, args.last_note)
        print(f"The day that we should make the notes on last week is {day}")
    return 0