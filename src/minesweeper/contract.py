"""
Shared contract of the console game suite.

Games satisfy it structurally; there is no base class to inherit from.
"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Game(Protocol):
    """A single-player console game a menu can offer and run."""

    @property
    def name(self) -> str:
        """Display name."""
        ...

    def play(self) -> Optional[int]:
        """
        Run one full game to completion.

        Returns:
            The score, or None if the player quit.
        """
        ...
