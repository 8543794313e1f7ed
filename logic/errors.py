"""
Errors raised by the game logic.
"""

from typing import Optional


class GameError(Exception):
    """Base class for all game logic errors."""


class IllegalMove(GameError):
    """
    A move that cannot be played.

    Raised for an out-of-range index, an occupied cell, a finished game,
    or a human trying to play on the computer's turn. The game state is
    never changed by a rejected move.
    """

    def __init__(self, reason: str, index: Optional[int] = None):
        super().__init__(reason)
        self.reason = reason
        self.index = index


class NoAvailableMove(GameError):
    """The computer was asked to move on a board with no empty cell."""
