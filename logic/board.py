"""
Board primitives for TicTacToe.
Marks, the 3x3 cell layout, and the fixed set of winning patterns.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple


class Mark(Enum):
    """The symbol a player places in a cell."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.O if self == Mark.X else Mark.X


# An empty cell holds None
EMPTY = None

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

Cell = Optional[Mark]
Board = List[Cell]
Pattern = Tuple[int, int, int]

# All winning lines, as cell index triples.
# The order matters: rows first, then columns, then diagonals.
WIN_PATTERNS: Tuple[Pattern, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


def new_board() -> Board:
    """Create an empty board."""
    return [EMPTY] * CELL_COUNT


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board to scan.

    Returns:
        Cell indices in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell is EMPTY]


def is_valid_index(index) -> bool:
    """True for an int cell index 0-8. bool is an int subclass, but True is not a cell."""
    return not isinstance(index, bool) and isinstance(index, int) \
        and 0 <= index < CELL_COUNT


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index (0-8) to (row, col)."""
    return divmod(index, BOARD_SIZE)


def parse_board(text: str) -> Board:
    """
    Build a board from a 9 character string.

    'X' and 'O' are marks, '.', '_' or ' ' are empty cells.
    Rows may be separated with '/' ("XXX/.OO/...").

    Args:
        text: The board layout, row-major.

    Returns:
        A new board.
    """
    symbols = text.replace("/", "")
    if len(symbols) != CELL_COUNT:
        raise ValueError(f"Board needs {CELL_COUNT} cells, got {len(symbols)}")

    board = new_board()
    for index, symbol in enumerate(symbols.upper()):
        if symbol in ("X", "O"):
            board[index] = Mark(symbol)
        elif symbol not in (".", "_", " "):
            raise ValueError(f"Unknown cell symbol {symbol!r} at {index}")
    return board
