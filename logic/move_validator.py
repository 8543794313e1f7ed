"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import TYPE_CHECKING, List, Optional
from dataclasses import dataclass
from .board import CELL_COUNT, EMPTY, empty_cells, is_valid_index

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: "GameState", index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not is_valid_index(index):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        occupant = game_state.board[index]
        if occupant is not EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of playable cell indices (empty once the game is over).
        """
        if game_state.is_game_over:
            return []

        return empty_cells(game_state.board)
