"""
Console Minesweeper.

Provides the board generator, reveal engine, console game driver and a
Gymnasium environment over the same engine.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    ConfigurationError,
    generate_board,
    CLASSIC,
    BEGINNER,
    INTERMEDIATE,
)
from .reveal import RevealOutcome, reveal, toggle_flag, is_won
from .commands import Action, Command, CommandError, parse_command
from .render import render_board
from .contract import Game
from .game import MineSweeperGame
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "ConfigurationError",
    "generate_board",
    "CLASSIC",
    "BEGINNER",
    "INTERMEDIATE",
    "RevealOutcome",
    "reveal",
    "toggle_flag",
    "is_won",
    "Action",
    "Command",
    "CommandError",
    "parse_command",
    "render_board",
    "Game",
    "MineSweeperGame",
    "MinesweeperEnv",
]
