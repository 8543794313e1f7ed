"""
Tests for the TurnDriver: game modes and the delayed computer move.
Run with: pytest
"""

import random

import pytest

from logic.board import Mark
from logic.config import GameConfig
from logic.errors import IllegalMove
from logic.game_state import GameStatus, Outcome
from logic.move_advisor import MoveAdvisor
from logic.turn_driver import TurnDriver, GameMode, BlockingScheduler

X, O = Mark.X, Mark.O


class ManualScheduler:
    """Collects scheduled callbacks so a test can fire them by hand."""

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self.delays = []
        self._next_handle = 0

    def schedule(self, delay_ms, callback):
        self._next_handle += 1
        self.pending[self._next_handle] = callback
        self.delays.append(delay_ms)
        return self._next_handle

    def cancel(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire_all(self):
        callbacks = list(self.pending.values())
        self.pending.clear()
        for callback in callbacks:
            callback()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def driver(scheduler):
    advisor = MoveAdvisor(O, rng=random.Random(1))
    return TurnDriver(scheduler, mode=GameMode.VS_COMPUTER, advisor=advisor)


def test_two_player_mode_never_schedules(scheduler):
    driver = TurnDriver(scheduler)
    driver.handle_cell(0)
    driver.handle_cell(4)

    assert scheduler.pending == {}
    assert driver.game_state.cell_at(4) == O
    assert driver.game_state.current_player == X


def test_computer_move_is_scheduled_with_delay(driver, scheduler):
    driver.handle_cell(4)

    assert driver.has_pending_move
    assert driver.is_computer_turn
    assert scheduler.delays == [GameConfig.AI_DELAY_MS]
    # Nothing applied until the delay has passed
    assert driver.game_state.empty_cells() == [0, 1, 2, 3, 5, 6, 7, 8]

    scheduler.fire_all()

    assert not driver.has_pending_move
    assert len(driver.game_state.empty_cells()) == 7
    assert driver.game_state.moves[-1].player == O
    assert driver.game_state.current_player == X


def test_human_cannot_move_for_the_computer(driver, scheduler):
    driver.handle_cell(4)

    with pytest.raises(IllegalMove):
        driver.handle_cell(0)

    assert driver.game_state.cell_at(0) is None
    assert len(scheduler.pending) == 1


def test_computer_blocks_human(driver, scheduler):
    driver.handle_cell(0)
    scheduler.fire_all()
    # Put X on 1 unless the computer already took it
    second = 1 if driver.game_state.cell_at(1) is None else 3
    driver.handle_cell(second)
    scheduler.fire_all()

    threat = {1: 2, 3: 6}[second]
    assert driver.game_state.cell_at(threat) == O


def test_failed_scheduling_does_not_lock_out_the_human(driver, scheduler):
    calls = []

    def flaky_listener(event):
        calls.append(event)
        if calls.count("thinking") == 1 and event == "thinking":
            raise RuntimeError("listener failed")

    driver.add_listener(flaky_listener)

    with pytest.raises(RuntimeError):
        driver.handle_cell(4)

    # Nothing was scheduled, so nothing may be reported as pending
    assert scheduler.pending == {}
    assert not driver.has_pending_move

    # The next click retries the computer move instead of waiting forever
    with pytest.raises(IllegalMove):
        driver.handle_cell(0)
    assert driver.has_pending_move
    assert len(scheduler.pending) == 1

    scheduler.fire_all()
    assert driver.game_state.moves[-1].player == O
    assert driver.game_state.current_player == X


def test_scheduler_error_leaves_no_pending_move():
    class BrokenScheduler(ManualScheduler):
        def schedule(self, delay_ms, callback):
            raise RuntimeError("scheduler failed")

    driver = TurnDriver(BrokenScheduler(), mode=GameMode.VS_COMPUTER)

    with pytest.raises(RuntimeError):
        driver.handle_cell(4)

    assert not driver.has_pending_move
    assert driver.game_state.cell_at(4) == X

    driver.restart()
    assert driver.game_state.board == [None] * 9


def test_restart_discards_pending_computer_move(driver, scheduler):
    driver.handle_cell(4)
    callback = next(iter(scheduler.pending.values()))

    driver.restart()

    assert scheduler.cancelled == [1]
    assert not driver.has_pending_move
    # Even if the host fires the old callback anyway, it must do nothing
    callback()
    assert driver.game_state.board == [None] * 9
    assert driver.game_state.current_player == X
    assert driver.game_state.status == GameStatus.in_progress()


def test_stale_callback_ignored_after_new_game_started(driver, scheduler):
    driver.handle_cell(4)
    stale = next(iter(scheduler.pending.values()))
    driver.restart()

    driver.handle_cell(0)
    assert driver.has_pending_move

    stale()
    # Only the human move is on the board, the new computer move still pending
    assert driver.game_state.empty_cells() == [1, 2, 3, 4, 5, 6, 7, 8]
    assert driver.has_pending_move

    scheduler.fire_all()
    assert len(driver.game_state.empty_cells()) == 7


def test_switching_mode_restarts(driver, scheduler):
    driver.handle_cell(4)
    driver.set_mode(GameMode.TWO_PLAYER)

    assert driver.mode == GameMode.TWO_PLAYER
    assert driver.game_state.board == [None] * 9
    assert not driver.has_pending_move
    assert scheduler.pending == {}


def test_no_computer_move_after_human_wins(scheduler):
    driver = TurnDriver(scheduler)
    for index in (0, 3, 1, 4):
        driver.handle_cell(index)
    driver.mode = GameMode.VS_COMPUTER
    driver.handle_cell(2)

    assert driver.game_state.status.outcome == Outcome.WON
    assert not driver.has_pending_move
    assert scheduler.pending == {}


def test_listeners_receive_events(driver, scheduler):
    events = []
    driver.add_listener(events.append)

    driver.handle_cell(4)
    scheduler.fire_all()
    driver.restart()

    assert events == ["move", "thinking", "move", "reset"]


def test_computer_playing_x_moves_first():
    class XFirstConfig(GameConfig):
        COMPUTER_MARK = Mark.X

    scheduler = ManualScheduler()
    driver = TurnDriver(scheduler, mode=GameMode.VS_COMPUTER, config=XFirstConfig())
    driver.restart()

    assert driver.has_pending_move
    scheduler.fire_all()
    assert driver.game_state.moves[0].player == X


def test_blocking_scheduler_plays_full_game():
    config = GameConfig()
    config.AI_DELAY_MS = 0
    config.RANDOM_SEED = 3
    driver = TurnDriver(BlockingScheduler(), mode=GameMode.VS_COMPUTER, config=config)

    while not driver.game_state.is_game_over:
        driver.handle_cell(driver.game_state.empty_cells()[0])
        assert not driver.has_pending_move

    players = [m.player for m in driver.game_state.moves]
    assert players == [X if i % 2 == 0 else O for i in range(len(players))]
