"""
Turn driver for TicTacToe.
Runs the game for a front-end: human input, game mode, and the
delayed computer move.
"""

import random
import time
from enum import Enum
from typing import Any, Callable, List, Optional

from .board import Mark
from .config import GameConfig
from .errors import IllegalMove
from .game_state import GameState, Move
from .move_advisor import MoveAdvisor


class GameMode(Enum):
    """Who is playing."""
    TWO_PLAYER = "2 Player"
    VS_COMPUTER = "Vs AI"


class BlockingScheduler:
    """
    Scheduler that waits and then runs the callback straight away.
    Used by the console front-end, where nothing can happen during the wait.
    """

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        if delay_ms > 0:
            time.sleep(delay_ms / 1000.0)
        callback()
        return None

    def cancel(self, handle: Any):
        pass


class TurnDriver:
    """
    Drives a game of TicTacToe.

    Owns the GameState and, in VS_COMPUTER mode, schedules the computer's
    reply through ``scheduler``. A scheduler is any object with
    ``schedule(delay_ms, callback) -> handle`` and ``cancel(handle)``.

    Listeners are called with an event name:
    - "move": a move was applied (human or computer)
    - "thinking": a computer move has been scheduled
    - "reset": the board was cleared
    """

    def __init__(
        self,
        scheduler,
        mode: GameMode = GameMode.TWO_PLAYER,
        advisor: Optional[MoveAdvisor] = None,
        config: Optional[GameConfig] = None,
        game_state: Optional[GameState] = None
    ):
        """
        Initialize the driver.

        Args:
            scheduler: Runs the delayed computer move.
            mode: Starting game mode.
            advisor: Computer player. Built from config if not provided.
            config: Game configuration. Uses defaults if not provided.
            game_state: State to drive. A new game if not provided.
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler
        self.mode = mode
        self.computer_mark: Mark = self.config.COMPUTER_MARK
        self.advisor = advisor or MoveAdvisor(
            self.computer_mark, random.Random(self.config.RANDOM_SEED)
        )
        self.delay_ms = self.config.AI_DELAY_MS
        self.game_state = game_state or GameState()

        self._listeners: List[Callable[[str], None]] = []

        # Bumped on every restart so a stale computer move can be recognised
        self._generation = 0
        self._pending_generation: Optional[int] = None
        self._pending_handle: Any = None

        self._maybe_schedule_computer_move()

    def add_listener(self, callback: Callable[[str], None]):
        """Register a callback for driver events."""
        self._listeners.append(callback)

    def _notify(self, event: str):
        for callback in list(self._listeners):
            callback(event)

    @property
    def is_computer_turn(self) -> bool:
        """True if the computer should make the next move."""
        return (
            self.mode == GameMode.VS_COMPUTER
            and not self.game_state.is_game_over
            and self.game_state.current_player == self.computer_mark
        )

    @property
    def has_pending_move(self) -> bool:
        """True while a computer move is scheduled but not yet played."""
        return self._pending_generation is not None

    def handle_cell(self, index: int) -> Move:
        """
        Play a human move.

        Args:
            index: Cell the human picked (0-8).

        Returns:
            The Move that was played.

        Raises:
            IllegalMove: The move is not allowed, including any move made
                while it is the computer's turn.
        """
        if self.is_computer_turn:
            # Retry if an earlier attempt to schedule the computer move failed
            self._maybe_schedule_computer_move()
            raise IllegalMove("Wait for the computer to move", index)

        move = self.game_state.apply_move(index)
        self._notify("move")
        self._maybe_schedule_computer_move()
        return move

    def set_mode(self, mode: GameMode):
        """Switch game mode. Always starts a new game."""
        self.mode = mode
        self.restart()

    def restart(self):
        """
        Start a new game.

        Any scheduled computer move is cancelled and will never be applied.
        """
        self.cancel_pending_move()
        self._generation += 1
        self.game_state.reset()
        self._notify("reset")
        self._maybe_schedule_computer_move()

    def cancel_pending_move(self):
        """Cancel the scheduled computer move, if there is one."""
        if self._pending_handle is not None:
            self.scheduler.cancel(self._pending_handle)
        self._pending_handle = None
        self._pending_generation = None

    def _maybe_schedule_computer_move(self):
        if not self.is_computer_turn or self.has_pending_move:
            return

        generation = self._generation
        self._pending_generation = generation

        try:
            self._notify("thinking")
            handle = self.scheduler.schedule(
                self.delay_ms,
                lambda: self._play_computer_move(generation)
            )
        except Exception:
            # Nothing is scheduled, so the human must not be locked out
            if self._pending_generation == generation:
                self._pending_generation = None
            raise

        # A blocking scheduler has already run the move by now
        if self._pending_generation == generation:
            self._pending_handle = handle

    def _play_computer_move(self, generation: int):
        """Callback for the scheduled computer move."""
        if generation != self._generation or self._pending_generation != generation:
            return  # restarted since this was scheduled

        self._pending_generation = None
        self._pending_handle = None

        if not self.is_computer_turn:
            return

        index = self.advisor.choose_move(self.game_state.board)
        self.game_state.apply_move(index)
        self._notify("move")
