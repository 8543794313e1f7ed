"""
Game state management for TicTacToe.
Tracks the board, current player, and whether the game has ended.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .board import Board, Cell, Mark, Pattern, CELL_COUNT, new_board, empty_cells, is_valid_index
from .errors import IllegalMove
from .move_validator import MoveValidator
from .win_checker import WinChecker


class Outcome(Enum):
    """Where the game is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    The game result so far.

    winner and pattern are only set when outcome is WON.
    """
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Mark] = None
    pattern: Optional[Pattern] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def won(cls, winner: Mark, pattern: Pattern) -> "GameStatus":
        return cls(Outcome.WON, winner, pattern)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(Outcome.DRAW)

    @property
    def is_over(self) -> bool:
        """True for WON and DRAW."""
        return self.outcome != Outcome.IN_PROGRESS


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Which move this is in the game (0-8)


_validator = MoveValidator()
_win_checker = WinChecker()


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (None means empty)
    - Current player
    - Move history for the current game
    - Game status (in progress, won, draw)
    """

    board: Board = field(default_factory=new_board)

    # X always starts
    current_player: Mark = Mark.X

    moves: List[Move] = field(default_factory=list)

    status: GameStatus = field(default_factory=GameStatus.in_progress)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_over

    @property
    def winner(self) -> Optional[Mark]:
        return self.status.winner

    def cell_at(self, index: int) -> Cell:
        """
        Get the mark in a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The Mark in the cell, or None if it is empty.
        """
        if not is_valid_index(index):
            raise IllegalMove(f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}.", index)
        return self.board[index]

    def apply_move(self, index: int) -> Move:
        """
        Place the current player's mark at the given cell.

        The board is only touched once the move has been validated,
        so a rejected move leaves board, status and turn unchanged.

        Args:
            index: Cell index (0-8).

        Returns:
            The Move that was played.

        Raises:
            IllegalMove: The game is over, the index is off the board,
                or the cell is already occupied.
        """
        result = _validator.validate_move(self, index)
        if not result.is_valid:
            raise IllegalMove(result.error_message, index)

        self.board[index] = self.current_player

        move = Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves)
        )
        self.moves.append(move)

        self.evaluate_terminal()

        # The winner stays as current player so the result can name them
        if not self.is_game_over:
            self.current_player = self.current_player.opposite()

        return move

    def evaluate_terminal(self) -> GameStatus:
        """
        Update the status with winner/draw information.

        Returns:
            The new status.
        """
        result = _win_checker.check_winner(self.board)

        if result is not None:
            winner, pattern = result
            self.status = GameStatus.won(winner, pattern)
        elif _win_checker.is_full(self.board):
            self.status = GameStatus.draw()
        else:
            self.status = GameStatus.in_progress()

        return self.status

    def reset(self):
        """Go back to an empty board with X to move."""
        self.board = new_board()
        self.current_player = Mark.X
        self.moves = []
        self.status = GameStatus.in_progress()

    def empty_cells(self) -> List[int]:
        """Get all empty cell indices."""
        return empty_cells(self.board)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            moves=list(self.moves),
            status=self.status
        )

    def print_board(self):
        """Print the board to console."""
        print("\n┌───┬───┬───┐")

        for row in range(3):
            row_str = "│"
            for col in range(3):
                index = row * 3 + col
                cell = self.board[index]
                # Show the index in empty cells so players know what to type
                symbol = cell.value if cell is not None else str(index)
                row_str += f" {symbol} │"
            print(row_str)

            if row < 2:
                print("├───┼───┼───┤")

        print("└───┴───┴───┘")

        if self.is_game_over:
            if self.winner:
                print(f"\nPlayer {self.winner.value} Wins!")
            else:
                print("\nDraw!")
        else:
            print(f"\nPlayer {self.current_player.value}'s Turn")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # X takes the top row
    for index in (0, 3, 1, 4, 2):
        print(f"\n{game.current_player.value} moves to {index}")
        game.apply_move(index)
        game.print_board()

    print(f"\nStatus: {game.status}")
    print("\nGame state test done!")
