"""
Tests for the MoveAdvisor computer opponent.
Run with: pytest
"""

import random
from collections import Counter

import pytest

from logic.board import Mark, parse_board, new_board
from logic.errors import NoAvailableMove
from logic.move_advisor import MoveAdvisor, NO_CRITICAL_MOVE

X, O = Mark.X, Mark.O


@pytest.fixture
def advisor():
    return MoveAdvisor(O, rng=random.Random(0))


def test_completes_row_before_other_patterns(advisor):
    board = [O, O, None, X, X, None, None, None, None]
    assert advisor.find_critical_move(board, O) == 2


def test_finds_blocking_cell_for_opponent(advisor):
    board = parse_board("XX./.O./...")
    assert advisor.find_critical_move(board, X) == 2


@pytest.mark.parametrize("layout, mark, expected", [
    ("O.O/.../...", O, 1),    # gap in the middle of a row
    (".../.../.OO", O, 6),    # gap at the start of a row
    ("X../X../...", X, 6),    # column
    ("X../.../..X", X, 4),    # diagonal
    ("..O/.O./...", O, 6),    # anti-diagonal
])
def test_finds_gap_in_any_pattern(advisor, layout, mark, expected):
    assert advisor.find_critical_move(parse_board(layout), mark) == expected


def test_blocked_line_is_not_critical(advisor):
    # X X O: two of X but no empty cell
    board = parse_board("XXO/.../...")
    assert advisor.find_critical_move(board, X) is NO_CRITICAL_MOVE


def test_no_critical_move_on_empty_board(advisor):
    assert advisor.find_critical_move(new_board(), O) is NO_CRITICAL_MOVE
    assert advisor.find_critical_move(new_board(), X) is NO_CRITICAL_MOVE


def test_scan_order_picks_lowest_pattern(advisor):
    # O can finish the middle row (5), the left column (6) or the diagonal (8)
    board = parse_board("O../OO./...")
    assert advisor.find_critical_move(board, O) == 5

    # Left column (3) before either diagonal (8, 2)
    board = parse_board("O../.O./O..")
    assert advisor.find_critical_move(board, O) == 3


def test_find_critical_move_does_not_modify_board(advisor):
    board = parse_board("OO./XX./...")
    before = list(board)
    advisor.find_critical_move(board, O)
    advisor.choose_move(board)
    assert board == before


def test_choose_move_prefers_win_over_block(advisor):
    # O can win at 5, X threatens 2
    board = parse_board("XX./OO./X..")
    assert advisor.find_critical_move(board, X) == 2
    assert advisor.choose_move(board) == 5


def test_choose_move_blocks_when_it_cannot_win(advisor):
    board = parse_board("XX./.O./...")
    assert advisor.choose_move(board) == 2


def test_choose_move_for_x_player():
    advisor = MoveAdvisor(X, rng=random.Random(0))
    board = parse_board("OO./XX./...")
    # X wins at 5 rather than blocking O at 2
    assert advisor.choose_move(board) == 5


def test_choose_move_random_fallback_picks_empty_cells():
    board = parse_board("X../.O./...")
    advisor = MoveAdvisor(O, rng=random.Random(42))
    empty = {1, 2, 3, 5, 6, 7, 8}

    picks = Counter(advisor.choose_move(board) for _ in range(700))

    assert set(picks) == empty
    # Roughly uniform: each of 7 cells around 100 times
    assert all(count > 50 for count in picks.values())


def test_choose_move_is_repeatable_with_same_seed():
    board = new_board()
    first = [MoveAdvisor(O, rng=random.Random(5)).choose_move(board) for _ in range(3)]
    second = [MoveAdvisor(O, rng=random.Random(5)).choose_move(board) for _ in range(3)]
    assert first == second


def test_choose_move_on_full_board_raises(advisor):
    with pytest.raises(NoAvailableMove):
        advisor.choose_move(parse_board("XOX/XOO/OXX"))


def test_single_empty_cell_is_chosen(advisor):
    board = parse_board("XOX/XOO/OX.")
    assert advisor.choose_move(board) == 8
