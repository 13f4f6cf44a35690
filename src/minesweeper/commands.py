"""
Console command parsing.

Commands are ``r <row> <col>`` to reveal and ``f <row> <col>`` to toggle
a flag, with 1-based coordinates. ``q`` abandons the game.
"""
from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    """What a parsed command asks the game to do."""

    REVEAL = "r"
    FLAG = "f"
    QUIT = "q"


class CommandError(ValueError):
    """A command the player has to re-enter. The message is shown as-is."""


@dataclass(frozen=True)
class Command:
    """
    A parsed console command.

    Attributes:
        action: Requested action.
        row: 0-based row (unused for QUIT).
        col: 0-based column (unused for QUIT).
    """

    action: Action
    row: int = -1
    col: int = -1


QUIT_WORDS = ("q", "quit", "exit")


def parse_command(line: str, size: int) -> Command:
    """
    Parse one line of player input.

    Args:
        line: Raw input line.
        size: Board size, for the range check.

    Returns:
        The parsed command with 0-based coordinates.

    Raises:
        CommandError: With the message to show the player.
    """
    parts = line.strip().lower().split()
    if len(parts) == 1 and parts[0] in QUIT_WORDS:
        return Command(Action.QUIT)
    if len(parts) != 3:
        raise CommandError("Invalid. Use 'r row col' or 'f row col'")

    try:
        row = int(parts[1]) - 1
        col = int(parts[2]) - 1
    except ValueError:
        raise CommandError("Invalid coordinates.") from None

    if not (0 <= row < size and 0 <= col < size):
        raise CommandError(f"Coordinates out of range (1-{size})")

    letter = parts[0][0]
    if letter == Action.REVEAL.value:
        return Command(Action.REVEAL, row, col)
    if letter == Action.FLAG.value:
        return Command(Action.FLAG, row, col)
    raise CommandError("Unknown command. Use 'r' or 'f'.")
