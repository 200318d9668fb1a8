#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--seed N] [--policy {none,cell,neighborhood}]
    python main.py demo
"""
import argparse
import logging
import random
from typing import Callable, Optional, Sequence

from minesweeper import Game, InvalidMoveError, SafetyPolicy
from minesweeper.game import MAX_SIZE


logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]

POLICIES = {
    "none": SafetyPolicy.NONE,
    "cell": SafetyPolicy.AVOID_CELL,
    "neighborhood": SafetyPolicy.AVOID_NEIGHBORHOOD,
}

# Fixed 4x4 layout (A2, B2, C1) and a winning sequence of moves for it
DEMO_SIZE = 4
DEMO_LAYOUT = ((0, 1), (1, 1), (2, 0))
DEMO_MOVES = ("D4", "B1", "A1", "D1")


def prompt_int(
    prompt: str, minimum: int, maximum: int, input_fn: InputFn = input
) -> int:
    """Ask until the player enters an integer in [minimum, maximum]."""
    while True:
        text = input_fn(prompt)
        try:
            value = int(text.strip())
        except ValueError:
            value = None
        if value is not None and minimum <= value <= maximum:
            return value
        print(f"Please enter an integer between {minimum} and {maximum}.")


def play_round(game: Game, input_fn: InputFn = input) -> bool:
    """
    Play one round until the board is cleared or a mine goes off.

    Returns:
        True if the round was won.
    """
    print("\nHere is your minefield:")
    print(game.render_board())

    while not game.is_finished:
        position = input_fn("Select a square to reveal (e.g. A1): ")
        try:
            outcome = game.reveal(position)
        except InvalidMoveError as exc:
            print(f"Invalid move: {exc}")
            continue

        if outcome.mine_hit:
            print("Oh no, you detonated a mine! Game over.")
            print(game.render_board(reveal_all=True))
            return False

        print(f"This square contains {outcome.adjacent_count} adjacent mines.")
        print("\nHere is your updated minefield:")
        print(game.render_board())

    print("Congratulations, you have won the game!")
    return True


def play(args: argparse.Namespace, input_fn: InputFn = input) -> None:
    """Run interactive rounds until the player declines another."""
    rng = random.Random(args.seed)
    policy = POLICIES[args.policy]

    while True:
        print("Welcome to Minesweeper!")
        size = prompt_int(
            f"Enter the size of the grid (1-{MAX_SIZE}): ", 1, MAX_SIZE, input_fn
        )
        num_mines = prompt_int(
            f"Enter the number of mines to place on the grid (0-{size * size}): ",
            0,
            size * size,
            input_fn,
        )

        game = Game(size, num_mines, rng=rng, policy=policy)
        won = play_round(game, input_fn)
        logger.info("Round finished: %s", "won" if won else "lost")

        again = input_fn("Play again? (y/n): ")
        if again.strip().lower() != "y":
            break


def demo(
    args: Optional[argparse.Namespace] = None,
    moves: Sequence[str] = DEMO_MOVES,
) -> Game:
    """Replay a scripted round on the fixed demo layout."""
    game = Game(
        DEMO_SIZE,
        len(DEMO_LAYOUT),
        rng=random.Random(1),
        fixed_layout=DEMO_LAYOUT,
    )
    scripted = iter(moves)
    play_round(game, lambda prompt: next(scripted))
    return game


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    play_parser.add_argument(
        "--policy",
        choices=sorted(POLICIES),
        default="neighborhood",
        help="First-click safety policy",
    )

    subparsers.add_parser("demo", help="Replay a scripted winning round")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
