"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (click a cell to play)
- Game status and whose turn it is
- 2 Player / Vs AI mode toggle
- Winning line, confetti and a result dialog when the game ends
"""

import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Any, Callable, Optional

# Logic imports
from logic.board import Mark, index_to_row_col
from logic.config import GameConfig
from logic.errors import IllegalMove
from logic.game_state import Outcome
from logic.turn_driver import TurnDriver, GameMode

# Effects imports
from effects.config import EffectsConfig
from effects.confetti import ConfettiField
from effects.win_line import compute_win_line


BG_COLOR = '#1a1a2e'
CELL_COLOR = '#16213e'
MARK_COLORS = {
    Mark.X: '#00fff2',
    Mark.O: '#ff004c',
}


class TkScheduler:
    """Runs delayed callbacks on the Tk event loop."""

    def __init__(self, root: tk.Misc):
        self.root = root

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        return self.root.after(delay_ms, callback)

    def cancel(self, handle: Any):
        self.root.after_cancel(handle)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        mode: GameMode = GameMode.TWO_PLAYER,
        game_config: Optional[GameConfig] = None,
        effects_config: Optional[EffectsConfig] = None
    ):
        """Initialize the UI."""
        self.effects_config = effects_config or EffectsConfig()

        self.root = tk.Tk()
        self.scheduler = TkScheduler(self.root)
        self.driver = TurnDriver(self.scheduler, mode=mode, config=game_config)
        self.driver.add_listener(self._on_driver_event)

        # Effects state
        self.confetti: Optional[ConfettiField] = None
        self.confetti_job = None
        self.confetti_photo = None
        self.dialog_job = None
        self.dialog: Optional[tk.Toplevel] = None

        self._create_ui()
        self._render_board()
        self._update_status()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.effects_config

        self.root.title("TicTacToe")
        self.root.configure(bg=BG_COLOR)
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG_COLOR)
        style.configure('TLabel', background=BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 13), foreground='#ffd700')
        style.configure('TCheckbutton', background=BG_COLOR, foreground='white')

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # The board is drawn on a canvas so the line and confetti can go on top
        self.board_canvas = tk.Canvas(
            main_frame,
            width=cfg.BOARD_PIXELS,
            height=cfg.BOARD_PIXELS,
            bg=BG_COLOR,
            highlightthickness=0
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)

        self.cell_rects = []
        self.cell_texts = []
        for index in range(9):
            row, col = index_to_row_col(index)
            x0 = col * (cfg.CELL_SIZE + cfg.CELL_GAP)
            y0 = row * (cfg.CELL_SIZE + cfg.CELL_GAP)
            rect = self.board_canvas.create_rectangle(
                x0, y0, x0 + cfg.CELL_SIZE, y0 + cfg.CELL_SIZE,
                fill=CELL_COLOR, outline=''
            )
            text = self.board_canvas.create_text(
                x0 + cfg.CELL_SIZE / 2, y0 + cfg.CELL_SIZE / 2,
                text="", font=('Segoe UI', 48, 'bold')
            )
            self.cell_rects.append(rect)
            self.cell_texts.append(text)

        self.win_line_item = None
        self.confetti_item = None

        # Controls
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=(15, 0))

        self.ai_var = tk.BooleanVar(value=self.driver.mode == GameMode.VS_COMPUTER)
        ttk.Checkbutton(
            control_frame,
            variable=self.ai_var,
            command=self._toggle_mode
        ).pack(side=tk.LEFT)

        self.mode_label = ttk.Label(control_frame, text=self.driver.mode.value, width=8)
        self.mode_label.pack(side=tk.LEFT, padx=(0, 15))

        tk.Button(
            control_frame,
            text="🔄 Restart",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._restart
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=8,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _cell_at_point(self, x: float, y: float) -> Optional[int]:
        """Map a canvas point to a cell index, None for the gaps between cells."""
        cfg = self.effects_config
        pitch = cfg.CELL_SIZE + cfg.CELL_GAP

        col, x_offset = divmod(int(x), pitch)
        row, y_offset = divmod(int(y), pitch)

        if not (0 <= row < 3 and 0 <= col < 3):
            return None
        if x_offset >= cfg.CELL_SIZE or y_offset >= cfg.CELL_SIZE:
            return None
        return row * 3 + col

    def _on_canvas_click(self, event):
        """Handle a click on the board."""
        index = self._cell_at_point(event.x, event.y)
        if index is None:
            return

        try:
            self.driver.handle_cell(index)
        except IllegalMove as e:
            print(f"Ignored click on {index}: {e.reason}")

    def _on_driver_event(self, event: str):
        """Re-render after the driver changes something."""
        if event == "reset":
            self._clear_effects()

        self._render_board()
        self._update_status()

        if event == "move" and self.driver.game_state.is_game_over:
            self._show_result()

    def _render_board(self):
        """Update the board cells from the game state."""
        state = self.driver.game_state
        for index in range(9):
            mark = state.cell_at(index)
            if mark is None:
                self.board_canvas.itemconfigure(self.cell_texts[index], text="")
            else:
                self.board_canvas.itemconfigure(
                    self.cell_texts[index],
                    text=mark.value,
                    fill=MARK_COLORS[mark]
                )

    def _update_status(self):
        """Update the status label."""
        status = self.driver.game_state.status

        if status.outcome == Outcome.WON:
            text = f"Player {status.winner.value} Wins!"
        elif status.outcome == Outcome.DRAW:
            text = "Draw!"
        elif self.driver.is_computer_turn:
            text = "AI Thinking..."
        else:
            text = f"Player {self.driver.game_state.current_player.value}'s Turn"

        self.status_label.configure(text=text)

    def _show_result(self):
        """Start the end-of-game effects."""
        cfg = self.effects_config
        status = self.driver.game_state.status

        if status.outcome == Outcome.WON:
            self._draw_win_line(status.pattern)
            self._start_confetti()
            message = f"{status.winner.value} Wins!"
            delay = cfg.WIN_DIALOG_DELAY_MS
        else:
            message = "It's a Draw!"
            delay = cfg.DRAW_DIALOG_DELAY_MS

        self.dialog_job = self.scheduler.schedule(delay, lambda: self._open_dialog(message))

    def _draw_win_line(self, pattern):
        """Draw the line through the winning cells."""
        cfg = self.effects_config
        line = compute_win_line(pattern, cfg.CELL_SIZE, cfg.CELL_GAP)

        self.win_line_item = self.board_canvas.create_line(
            line.x1, line.y1, line.x2, line.y2,
            fill=cfg.LINE_COLOR,
            width=cfg.LINE_WIDTH,
            capstyle=tk.ROUND
        )

    def _start_confetti(self):
        """Start the confetti animation over the board."""
        size = self.effects_config.BOARD_PIXELS
        self.confetti = ConfettiField(size, size, self.effects_config)
        self._confetti_frame()

    def _confetti_frame(self):
        """Draw one confetti frame and schedule the next."""
        if self.confetti is None:
            return

        self.confetti.step()
        image = Image.fromarray(self.confetti.render_rgba())
        photo = ImageTk.PhotoImage(image)

        if self.confetti_item is None:
            self.confetti_item = self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        else:
            self.board_canvas.itemconfigure(self.confetti_item, image=photo)
        self.confetti_photo = photo  # Keep reference

        self.confetti_job = self.scheduler.schedule(
            self.effects_config.CONFETTI_FRAME_MS, self._confetti_frame
        )

    def _open_dialog(self, message: str):
        """Show the result dialog."""
        self.dialog_job = None

        self.dialog = tk.Toplevel(self.root)
        self.dialog.title("Game Over")
        self.dialog.configure(bg=BG_COLOR)
        self.dialog.transient(self.root)
        self.dialog.protocol("WM_DELETE_WINDOW", self._close_dialog)

        ttk.Label(self.dialog, text=message, style='Title.TLabel').pack(padx=40, pady=(20, 10))
        tk.Button(
            self.dialog,
            text="New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._restart
        ).pack(pady=(0, 20))

    def _close_dialog(self):
        if self.dialog is not None:
            self.dialog.destroy()
            self.dialog = None

    def _clear_effects(self):
        """Remove the line, confetti and dialog, and cancel their timers."""
        if self.dialog_job is not None:
            self.scheduler.cancel(self.dialog_job)
            self.dialog_job = None
        self._close_dialog()

        if self.confetti_job is not None:
            self.scheduler.cancel(self.confetti_job)
            self.confetti_job = None
        self.confetti = None
        self.confetti_photo = None

        for item in (self.win_line_item, self.confetti_item):
            if item is not None:
                self.board_canvas.delete(item)
        self.win_line_item = None
        self.confetti_item = None

    def _toggle_mode(self):
        """Switch between 2 Player and Vs AI."""
        mode = GameMode.VS_COMPUTER if self.ai_var.get() else GameMode.TWO_PLAYER
        self.mode_label.configure(text=mode.value)
        print(f"Mode set to: {mode.value}")
        self.driver.set_mode(mode)

    def _restart(self):
        """Start a new game."""
        print("Resetting game...")
        self.driver.restart()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._clear_effects()
        self.driver.cancel_pending_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--vs-ai",
        action="store_true",
        help="Play against the computer"
    )

    args = parser.parse_args()

    mode = GameMode.VS_COMPUTER if args.vs_ai else GameMode.TWO_PLAYER
    ui = TicTacToeUI(mode=mode)
    ui.run()


if __name__ == "__main__":
    main()
