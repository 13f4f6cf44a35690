#!/usr/bin/env python3
"""
Console games - Main entry point.

Usage:
    python main.py list
    python main.py play [--game minesweeper] [--size N] [--mines M] [--seed S]
"""
import argparse
import logging
import random
import sys
from typing import Callable, Dict

from minesweeper import BoardConfig, ConfigurationError, Game, MineSweeperGame


def make_minesweeper(args: argparse.Namespace) -> Game:
    config = BoardConfig(size=args.size, num_mines=args.mines)
    return MineSweeperGame(config=config, rng=random.Random(args.seed))


GAMES: Dict[str, Callable[[argparse.Namespace], Game]] = {
    "minesweeper": make_minesweeper,
}


def list_games(args: argparse.Namespace) -> int:
    """Print the registered games."""
    for key in GAMES:
        print(key)
    return 0


def play(args: argparse.Namespace) -> int:
    """Build the selected game, play it and print the score."""
    try:
        game = GAMES[args.game](args)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print(f"=== {game.name} ===")
    score = game.play()
    if score is None:
        print(f"\n{game.name} abandoned.")
    else:
        print(f"\n{game.name} score: {score}")
    return 0


def main() -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Console games - pick one and play"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log debug output to stderr"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("list", help="List available games")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--game", choices=sorted(GAMES), default="minesweeper",
        help="Game to play",
    )
    play_parser.add_argument(
        "--size", type=int, default=8, help="Board size (NxN)"
    )
    play_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the layout"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "list":
        return list_games(args)
    if args.command == "play":
        return play(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
