"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, MineSweeperGame


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return Board.from_mines(3, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """5x5 board with no mines, for cascade testing."""
    return Board.from_mines(5, [])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board split by a column of mines.

    Columns 0-1 are safe, column 2 is all mines, columns 3-4 are safe.
    """
    return Board.from_mines(5, [(row, 2) for row in range(5)])


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Game Fixtures
# ============================================================================

class ScriptedConsole:
    """Feeds prepared input lines and records every output line."""

    def __init__(self, lines: List[str]) -> None:
        self._lines = list(lines)
        self.output: List[str] = []
        self.prompts = 0

    def read(self, prompt: str) -> str:
        self.prompts += 1
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def make_game() -> Callable:
    """
    Build a game on a fixed board driven by scripted input.

    Returns a factory ``(board, lines) -> (game, console)``.
    """
    def factory(board: Board, lines: List[str]):
        console = ScriptedConsole(lines)
        game = MineSweeperGame(
            config=board.config,
            input_fn=console.read,
            output_fn=console.write,
        )
        game.new_board = lambda: board
        return game, console

    return factory


@pytest.fixture
def classic_config() -> BoardConfig:
    return BoardConfig(8, 10)
