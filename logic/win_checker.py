"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Sequence, Tuple
from .board import Cell, Mark, Pattern, WIN_PATTERNS, EMPTY


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # Scan order is rows, then columns, then diagonals
    WINNING_LINES = WIN_PATTERNS

    def check_winner(self, board: Sequence[Cell]) -> Optional[Tuple[Mark, Pattern]]:
        """
        Check if there's a winner.

        The first matching line in WINNING_LINES wins, so if several
        lines are complete the lowest one in scan order is reported.

        Args:
            board: The 9 cell board.

        Returns:
            (winning mark, winning line), or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner, line

        return None

    def _check_line(self, board: Sequence[Cell], line: Pattern) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Args:
            board: The game board.
            line: The three cell indices to check.

        Returns:
            The winning Mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if board[a] is not EMPTY and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def is_full(self, board: Sequence[Cell]) -> bool:
        """True if no empty cell remains."""
        return all(cell is not EMPTY for cell in board)

    def check_draw(self, board: Sequence[Cell]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.

        Args:
            board: The 9 cell board.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(board) is not None:
            return False

        return self.is_full(board)

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[Pattern]:
        """
        Get the winning line if there is one.

        Args:
            board: The 9 cell board.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        result = self.check_winner(board)
        return result[1] if result is not None else None
