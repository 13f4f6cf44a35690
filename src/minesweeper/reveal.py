"""
Reveal engine, flag toggler and win evaluator.

These operate on a Board and only ever change cell states; the mine
layout is left alone.
"""
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List

from .board import Board, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RevealOutcome:
    """
    Result of a single reveal command.

    Attributes:
        hit_mine: The target cell holds a mine. Nothing was revealed.
        newly_revealed: Every cell this command revealed, cascade included.
    """

    hit_mine: bool = False
    newly_revealed: FrozenSet[Position] = field(default_factory=frozenset)

    @property
    def changed(self) -> bool:
        return bool(self.newly_revealed)


NOTHING_REVEALED = RevealOutcome()


# ============================================================================
# Reveal Engine
# ============================================================================

def reveal(board: Board, row: int, col: int) -> RevealOutcome:
    """
    Reveal a cell, cascading through zero-count regions.

    A revealed or flagged target is a no-op. A mine target is reported
    through ``hit_mine`` and left hidden; ending the game is up to the
    caller. Otherwise the target is revealed and, if no mine touches it,
    its hidden unflagged neighbors are revealed in turn. Cells that
    border a mine are revealed but do not expand further.

    Each cell is marked revealed before it goes on the worklist, so no
    cell is pushed twice and the cascade ends after at most size**2
    steps.

    Args:
        board: Board to mutate.
        row: Row index (0-based).
        col: Column index (0-based).

    Raises:
        IndexError: If the position is off the board.
    """
    cell = board.get_cell(row, col)
    if not cell.is_hidden:
        return NOTHING_REVEALED
    if cell.is_mine:
        return RevealOutcome(hit_mine=True)

    board.mark_revealed(row, col)
    revealed = [(row, col)]
    pending: List[Position] = [(row, col)] if cell.adjacent_mines == 0 else []

    while pending:
        current = pending.pop()
        for neighbor_row, neighbor_col in board.neighbors(*current):
            neighbor = board.get_cell(neighbor_row, neighbor_col)
            if neighbor.is_mine or not neighbor.is_hidden:
                continue
            board.mark_revealed(neighbor_row, neighbor_col)
            revealed.append((neighbor_row, neighbor_col))
            if neighbor.adjacent_mines == 0:
                pending.append((neighbor_row, neighbor_col))

    if len(revealed) > 1:
        logger.debug("Cascade from (%d, %d) revealed %d cells",
                     row, col, len(revealed))
    return RevealOutcome(newly_revealed=frozenset(revealed))


# ============================================================================
# Flags and Win Check
# ============================================================================

def toggle_flag(board: Board, row: int, col: int) -> bool:
    """
    Toggle the flag on a cell.

    Returns:
        The new flag state. Revealed cells cannot be flagged and stay
        as they are, reporting False.

    Raises:
        IndexError: If the position is off the board.
    """
    return board.get_cell(row, col).toggle_flag()


def is_won(board: Board) -> bool:
    """Check whether every safe cell has been revealed."""
    return board.revealed_count == board.config.safe_cells
