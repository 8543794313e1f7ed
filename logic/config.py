"""
Game configuration for TicTacToe.
Who plays which mark and how the computer player behaves.
"""

from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to adjust the computer player.
    """

    # ==================== PLAYERS ====================
    # X always moves first, so the human starts by default
    COMPUTER_MARK = Mark.O

    # ==================== COMPUTER PLAYER ====================
    # Pause before the computer moves, so it looks like it is thinking
    AI_DELAY_MS = 600

    # Seed for the random fallback move (None = different every game)
    RANDOM_SEED = None
