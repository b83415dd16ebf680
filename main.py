from __future__ import annotations

import argparse
import logging
import random
import sys

from game.board import Board
from game.errors import ConfigError, StateFileError
from game.ruleset import DEFAULT_RULES
from plot import plot
from ui.cli import gameloop


def build_parser():
    parser = argparse.ArgumentParser(description="Mastermind")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Verbose logging")
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Play a game in the terminal (default)")
    play.add_argument("--length", type=int, default=DEFAULT_RULES["code_length"],
                      help="Code length (default: %(default)s)")
    play.add_argument("--attempts", type=int, default=DEFAULT_RULES["max_attempts"],
                      help="Number of guesses (default: %(default)s)")
    play.add_argument("--colors", type=str, default=None,
                      help="Palette as letters, e.g. RGBYOP (default: RBGYWK)")
    play.add_argument("--seed", type=int, default=None,
                      help="Seed for a reproducible secret")
    play.add_argument("--load", type=str, default=None,
                      help="Resume a saved game")

    stats = sub.add_parser("stats", help="Statistics over saved games")
    stats.add_argument("files", nargs="+", help="Saved game files or glob patterns")
    stats.add_argument("--outdir", default="./results",
                       help="Output directory for PNGs")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "stats":
        return plot.main(args.files + ["--outdir", args.outdir])

    # play is the default command
    if args.command is None:
        argv = sys.argv[1:] if argv is None else list(argv)
        args = parser.parse_args(argv + ["play"])

    try:
        if args.load:
            board = Board.from_file(args.load)
        else:
            rules = {"code_length": args.length, "max_attempts": args.attempts}
            if args.colors:
                rules["colors"] = list(args.colors.upper())
            rng = random.Random(args.seed) if args.seed is not None else None
            board = Board(rules=rules, rng=rng)
    except (ConfigError, StateFileError, OSError) as e:
        print(f"Cannot start game: {e}", file=sys.stderr)
        return 2

    gameloop(board)
    return 0


if __name__ == "__main__":
    sys.exit(main())
