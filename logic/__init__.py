"""
Logic module for TicTacToe.
Handles game state, rules, the computer opponent, and turn flow.
"""

__version__ = "1.0.0"

from .board import Mark, WIN_PATTERNS, parse_board
from .errors import GameError, IllegalMove, NoAvailableMove
from .game_state import GameState, GameStatus, Outcome, Move
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .move_advisor import MoveAdvisor
from .config import GameConfig
from .turn_driver import TurnDriver, GameMode, BlockingScheduler
