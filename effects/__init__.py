"""
Effects module for TicTacToe.
Winning line geometry and the confetti animation.
"""

from .config import EffectsConfig
from .win_line import WinLine, compute_win_line
from .confetti import ConfettiField
