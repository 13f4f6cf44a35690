"""
Console Minesweeper game driver.

Owns one board for the length of a game, reads commands, dispatches
them to the reveal engine or the flag toggler and prints the board.
"""
import logging
import random
from typing import Callable, Optional

from .board import Board, BoardConfig, CLASSIC, generate_board
from .commands import Action, Command, CommandError, parse_command
from .render import render_board
from .reveal import is_won, reveal, toggle_flag

logger = logging.getLogger(__name__)

LOSS_SCORE = 0
WIN_SCORE = 1

INTRO = (
    "Welcome to Minesweeper!",
    "Uncover tiles to reveal numbers or mines.",
    "Numbers tell how many of the 8 adjacent tiles are mines.",
    "Commands: 'r row col' to reveal, 'f row col' to flag/unflag",
    "Uncover all safe tiles to win!",
)


class MineSweeperGame:
    """
    Minesweeper on a square grid, played from the console.

    Satisfies the suite's ``Game`` contract: ``play`` returns 1 on a win,
    0 when a mine is hit and None if the player quits or input runs out.
    """

    def __init__(
        self,
        config: BoardConfig = CLASSIC,
        rng: Optional[random.Random] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        """
        Initialize the game.

        Args:
            config: Board size and mine count, validated on creation.
            rng: Random source for mine placement.
            input_fn: Reads one line, given a prompt.
            output_fn: Writes one line.
        """
        self.config = config
        self.rng = rng or random.Random()
        self._input = input_fn
        self._output = output_fn
        self.board: Optional[Board] = None

    @property
    def name(self) -> str:
        return "MineSweeper"

    def new_board(self) -> Board:
        """Generate the board for a new game."""
        return generate_board(self.config, self.rng)

    def play(self) -> Optional[int]:
        """Play one game to the end and return its score."""
        for line in INTRO:
            self._output(line)

        self.board = self.new_board()
        self._print_board()

        while True:
            try:
                line = self._input("Enter command: ")
            except EOFError:
                logger.debug("Input closed, abandoning game")
                return None

            try:
                command = parse_command(line, self.board.size)
            except CommandError as exc:
                self._output(str(exc))
                continue

            if command.action is Action.QUIT:
                self._output("Game abandoned.")
                return None
            if command.action is Action.FLAG:
                self._flag(command)
                continue

            score = self._reveal(command)
            if score is not None:
                logger.debug("Game over with score %d", score)
                return score

    # ========================================================================
    # Command Handlers
    # ========================================================================

    def _flag(self, command: Command) -> None:
        cell = self.board.get_cell(command.row, command.col)
        if cell.is_revealed:
            self._output("Can't flag a revealed cell.")
        else:
            toggle_flag(self.board, command.row, command.col)
        self._print_board()

    def _reveal(self, command: Command) -> Optional[int]:
        """Reveal a cell; return the score if the game just ended."""
        cell = self.board.get_cell(command.row, command.col)
        if cell.is_flagged:
            self._output("Unflag first to reveal.")
            return None
        if cell.is_revealed:
            self._output("Already revealed.")
            return None

        outcome = reveal(self.board, command.row, command.col)
        if outcome.hit_mine:
            self._print_board(show_mines=True)
            self._output("BOOM! You hit a mine. Game over!")
            return LOSS_SCORE

        self._print_board()
        if is_won(self.board):
            self._print_board(show_mines=True)
            self._output("Congratulations! You cleared all safe cells!")
            return WIN_SCORE
        return None

    def _print_board(self, show_mines: bool = False) -> None:
        self._output(render_board(self.board, show_mines))
