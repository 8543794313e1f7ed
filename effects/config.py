"""
Effects configuration for TicTacToe.
Board geometry, winning line, confetti and result dialog settings.
"""


def hex_to_bgr(color: str) -> tuple:
    """Convert '#rrggbb' to an OpenCV (b, g, r) tuple."""
    color = color.lstrip("#")
    r, g, b = (int(color[i:i + 2], 16) for i in (0, 2, 4))
    return b, g, r


class EffectsConfig:
    """
    Configuration class for the visual effects.
    Change these values to restyle the board.
    """

    # ==================== BOARD GEOMETRY ====================
    CELL_SIZE = 120   # pixels per cell
    CELL_GAP = 8      # pixels between cells
    BOARD_PIXELS = CELL_SIZE * 3 + CELL_GAP * 2

    # ==================== WINNING LINE ====================
    LINE_WIDTH = 6
    LINE_COLOR = "#ffffff"

    # ==================== CONFETTI ====================
    CONFETTI_COUNT = 150
    CONFETTI_COLORS = ["#00fff2", "#ff004c", "#7000ff", "#ffffff"]
    CONFETTI_SIZE_RANGE = (2.0, 10.0)    # radius in pixels
    CONFETTI_SPEED_RANGE = (2.0, 7.0)    # pixels per frame
    CONFETTI_RESPAWN_Y = -10.0           # where fallen particles restart
    CONFETTI_FRAME_MS = 20

    # ==================== RESULT DIALOG ====================
    # Give the line and confetti time to show before the dialog
    WIN_DIALOG_DELAY_MS = 1500
    DRAW_DIALOG_DELAY_MS = 500
