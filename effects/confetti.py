"""
Confetti animation for TicTacToe.
Simulates falling particles with numpy and draws them with OpenCV.
"""

import cv2
import numpy as np
from typing import Optional
from .config import EffectsConfig, hex_to_bgr


class ConfettiField:
    """
    A field of confetti particles falling down a width x height frame.

    Particles start above the frame, fall at their own speed, and
    restart just above the top edge once they drop out of view.
    """

    def __init__(
        self,
        width: int,
        height: int,
        config: Optional[EffectsConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the confetti field.

        Args:
            width: Frame width in pixels.
            height: Frame height in pixels.
            config: Effects configuration. Uses defaults if not provided.
            rng: Random generator. Pass a seeded one for repeatable output.
        """
        self.config = config or EffectsConfig()
        self.width = width
        self.height = height
        self.rng = rng or np.random.default_rng()

        self.palette = np.array(
            [hex_to_bgr(c) for c in self.config.CONFETTI_COLORS],
            dtype=np.uint8
        )

        count = self.config.CONFETTI_COUNT
        size_lo, size_hi = self.config.CONFETTI_SIZE_RANGE
        speed_lo, speed_hi = self.config.CONFETTI_SPEED_RANGE

        self.x = self.rng.uniform(0, width, count)
        # Start above the frame so the confetti rains in
        self.y = self.rng.uniform(-height, 0, count)
        self.size = self.rng.uniform(size_lo, size_hi, count)
        self.speed = self.rng.uniform(speed_lo, speed_hi, count)
        self.color_index = self.rng.integers(0, len(self.palette), count)

        self.frame_count = 0

    def __len__(self) -> int:
        return len(self.x)

    def step(self):
        """Advance every particle by one frame."""
        self.y += self.speed

        fallen = self.y > self.height
        self.y[fallen] = self.config.CONFETTI_RESPAWN_Y

        self.frame_count += 1

    def render(self) -> np.ndarray:
        """
        Draw the particles.

        Returns:
            A BGRA frame (height x width x 4). Everything but the
            particles is fully transparent.
        """
        frame = np.zeros((self.height, self.width, 4), dtype=np.uint8)

        for x, y, size, color_index in zip(self.x, self.y, self.size, self.color_index):
            # Skip particles that are still above the frame
            if y + size < 0:
                continue
            b, g, r = (int(v) for v in self.palette[color_index])
            cv2.circle(
                frame,
                (int(round(x)), int(round(y))),
                max(1, int(round(size))),
                (b, g, r, 255),
                -1
            )

        return frame

    def render_rgba(self) -> np.ndarray:
        """Draw the particles as an RGBA frame, ready for Pillow."""
        return cv2.cvtColor(self.render(), cv2.COLOR_BGRA2RGBA)
