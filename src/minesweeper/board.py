"""
Board module for the console Minesweeper game.

Holds the board configuration, the mine layout generator and the cell
state store that the reveal engine and renderer work against.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

class ConfigurationError(ValueError):
    """Board parameters that can never produce a playable game."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows and columns.
        num_mines: Total mines to place.
    """

    size: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ConfigurationError("Board size must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.total_cells - self.num_mines


# Preset layouts
CLASSIC = BoardConfig(8, 10)
BEGINNER = BoardConfig(9, 10)
INTERMEDIATE = BoardConfig(16, 40)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper cell state store.

    The mine layout is fixed at construction; only cell states change
    afterwards, through the reveal engine and the flag toggler.
    """

    config: BoardConfig
    mines: FrozenSet[Position]
    _grid: List[List[Cell]] = field(init=False, repr=False)
    _cells_revealed: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        """Build the grid and cache adjacency counts."""
        self.mines = frozenset(self.mines)
        self._check_layout()
        self._init_grid()
        self._calculate_adjacent_mines()

    @classmethod
    def from_mines(cls, size: int, mines: Iterable[Position]) -> "Board":
        """
        Build a board from a fixed mine layout.

        Args:
            size: Number of rows and columns.
            mines: (row, col) positions of every mine.

        Raises:
            ConfigurationError: On duplicate or out of range positions,
                or when the layout leaves no safe cell.
        """
        positions = list(mines)
        if len(set(positions)) != len(positions):
            raise ConfigurationError("Duplicate mine positions")
        config = BoardConfig(size, len(positions))
        return cls(config, frozenset(positions))

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _check_layout(self) -> None:
        if len(self.mines) != self.config.num_mines:
            raise ConfigurationError(
                f"Expected {self.config.num_mines} mines, got {len(self.mines)}"
            )
        for row, col in self.mines:
            if not self.is_valid_position(row, col):
                raise ConfigurationError(
                    f"Mine position ({row}, {col}) is off the board"
                )

    def _init_grid(self) -> None:
        """Create the grid of hidden cells with mines in place."""
        self._grid = [
            [Cell(is_mine=(row, col) in self.mines)
             for col in range(self.config.size)]
            for row in range(self.config.size)
        ]
        self._cells_revealed = 0

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for neighbor in self.neighbors(row, col)
            if neighbor in self.mines
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get the Moore neighborhood of a cell, clipped at the edges.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors. The center
            cell itself is never included.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.config.size):
            for col in range(self.config.size):
                yield row, col

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def size(self) -> int:
        return self.config.size

    @property
    def revealed_count(self) -> int:
        """Number of cells revealed so far."""
        return self._cells_revealed

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If the position is off the board.
        """
        if not self.is_valid_position(row, col):
            raise IndexError(f"Position ({row}, {col}) is off the board")
        return self._grid[row][col]

    def mark_revealed(self, row: int, col: int) -> bool:
        """
        Mark a single cell revealed, without cascading.

        Returns:
            True if the cell changed state.
        """
        if not self.get_cell(row, col).mark_revealed():
            return False
        self._cells_revealed += 1
        return True

    def revealed_positions(self) -> Set[Position]:
        return {pos for pos in self.positions() if self.get_cell(*pos).is_revealed}

    def flagged_positions(self) -> Set[Position]:
        return {pos for pos in self.positions() if self.get_cell(*pos).is_flagged}

    def mine_layout(self) -> np.ndarray:
        """
        Get the mine layout as a read-only boolean array.

        Returns:
            (size, size) array, True where a mine sits.
        """
        layout = np.zeros((self.config.size, self.config.size), dtype=bool)
        for row, col in self.mines:
            layout[row, col] = True
        layout.setflags(write=False)
        return layout

    def get_observation(self, show_mines: bool = False) -> np.ndarray:
        """
        Get board state as a numpy array.

        Args:
            show_mines: Report every mine as 9 (game over view).

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = mine (only with show_mines)
        """
        size = self.config.size
        obs = np.zeros((size, size), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation(show_mines)
        return obs


# ============================================================================
# Board Generator
# ============================================================================

def generate_board(
    config: BoardConfig,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Generate a board with mines placed uniformly at random.

    Mines are placed by rejection sampling: a random cell is drawn and
    redrawn while it already holds a mine, until the configured number
    of distinct mines is placed.

    Args:
        config: Validated board configuration.
        rng: Random source; pass a seeded instance for a fixed layout.

    Returns:
        A fresh board with every cell hidden.
    """
    rng = rng or random.Random()
    mines: Set[Position] = set()
    draws = 0
    while len(mines) < config.num_mines:
        draws += 1
        mines.add((rng.randrange(config.size), rng.randrange(config.size)))

    logger.debug(
        "Placed %d mines on a %dx%d board in %d draws",
        config.num_mines, config.size, config.size, draws,
    )
    return Board(config, frozenset(mines))
