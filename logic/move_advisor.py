"""
Move advisor for the TicTacToe computer player.
Picks a move with a shallow win / block / random heuristic.
"""

import random
from typing import Optional, Sequence
from .board import Cell, Mark, EMPTY, empty_cells
from .errors import NoAvailableMove
from .win_checker import WinChecker

# Returned by find_critical_move when no line can be completed
NO_CRITICAL_MOVE = None


class MoveAdvisor:
    """
    A computer opponent that looks one move ahead.

    Policy, in order:
    1. Complete one of its own lines (win)
    2. Fill the gap in one of the opponent's lines (block)
    3. Any empty cell, uniformly at random

    It does not see forks, so it can be beaten.
    """

    def __init__(self, player: Mark = Mark.O, rng: Optional[random.Random] = None):
        """
        Initialize the advisor.

        Args:
            player: Which mark the computer plays (default: O)
            rng: Random source for the fallback move. Pass a seeded
                random.Random for repeatable games.
        """
        self.player = player
        self.rng = rng or random.Random()

    def find_critical_move(self, board: Sequence[Cell], mark: Mark) -> Optional[int]:
        """
        Find a cell that would complete a line for ``mark``.

        Lines are checked in WinChecker order (rows, columns, diagonals)
        and the first qualifying one is used.

        Args:
            board: The 9 cell board. Not modified.
            mark: The mark that would be placed.

        Returns:
            The empty cell index, or NO_CRITICAL_MOVE.
        """
        for line in WinChecker.WINNING_LINES:
            cells = [board[i] for i in line]

            if cells.count(mark) == 2 and cells.count(EMPTY) == 1:
                for i in line:
                    if board[i] is EMPTY:
                        return i

        return NO_CRITICAL_MOVE

    def choose_move(self, board: Sequence[Cell]) -> int:
        """
        Choose the computer's next move.

        Args:
            board: The 9 cell board.

        Returns:
            Cell index to play.

        Raises:
            NoAvailableMove: The board is full.
        """
        available = empty_cells(board)
        if not available:
            raise NoAvailableMove("No empty cell left to play")

        # 1. Try to win
        move = self.find_critical_move(board, self.player)

        # 2. Otherwise block
        if move is NO_CRITICAL_MOVE:
            move = self.find_critical_move(board, self.player.opposite())

        # 3. Otherwise anything
        if move is NO_CRITICAL_MOVE:
            move = self.rng.choice(available)

        return move


# Quick test
if __name__ == "__main__":
    from .board import parse_board

    print("Testing MoveAdvisor...")

    advisor = MoveAdvisor(Mark.O)

    board = parse_board("XX./.O./...")
    move = advisor.choose_move(board)
    print(f"X is about to win with 2, advisor plays {move}")
    assert move == 2

    board = parse_board("OO./XX./...")
    move = advisor.choose_move(board)
    print(f"O can win with 2, advisor plays {move}")
    assert move == 2

    print("\nMoveAdvisor test done!")
