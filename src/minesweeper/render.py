"""Text rendering of a board for the console."""
from .board import Board
from .cell import Cell


def _symbol(cell: Cell, show_mines: bool) -> str:
    if show_mines and cell.is_mine:
        return "*"
    if cell.is_flagged:
        return "F"
    if not cell.is_revealed:
        return "."
    if cell.adjacent_mines == 0:
        return " "
    return str(cell.adjacent_mines)


def render_board(board: Board, show_mines: bool = False) -> str:
    """
    Render the board as lines of text.

    The first line numbers the columns from 1 and every row starts with
    its own 1-based number. Hidden cells show ``.``, flags ``F``, revealed
    cells their mine count (blank for zero). With ``show_mines`` every
    mine is drawn as ``*`` whatever its state.
    """
    size = board.size
    lines = ["  " + "".join(f"{col} " for col in range(1, size + 1))]
    for row in range(size):
        symbols = "".join(
            _symbol(board.get_cell(row, col), show_mines) + " "
            for col in range(size)
        )
        lines.append(f"{row + 1} {symbols}")
    return "\n".join(lines)
