"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or plays in the terminal with --no-ui.
Both front-ends drive the same game logic:
- GameState (board, turns, win/draw)
- MoveAdvisor (computer opponent)
- TurnDriver (human input, game mode, delayed computer move)
"""

import sys
from typing import Optional

from logic.config import GameConfig
from logic.errors import IllegalMove
from logic.turn_driver import TurnDriver, GameMode, BlockingScheduler


class TicTacToeConsole:
    """
    Terminal front-end for TicTacToe.

    Commands:
    - 0-8: place a mark in that cell
    - r: restart
    - m: toggle 2 Player / Vs AI (restarts)
    - q: quit
    """

    def __init__(self, mode: GameMode = GameMode.TWO_PLAYER, config: Optional[GameConfig] = None):
        self.driver = TurnDriver(BlockingScheduler(), mode=mode, config=config)
        self.driver.add_listener(self._on_driver_event)
        self.is_running = False

    def _on_driver_event(self, event: str):
        if event == "thinking":
            print("\nAI Thinking...")
        elif event == "move":
            move = self.driver.game_state.moves[-1]
            print(f"\n>>> {move.player.value} plays {move.index}")
            self.driver.game_state.print_board()

    def start(self):
        """Run the game loop until the user quits."""
        print("\n" + "="*40)
        print(f"   TicTacToe - {self.driver.mode.value}")
        print("="*40)
        print("Enter 0-8 to play, 'r' restart, 'm' switch mode, 'q' quit")

        self.driver.game_state.print_board()
        self.is_running = True

        while self.is_running:
            try:
                command = input("> ").strip().lower()
            except EOFError:
                break
            self.handle_command(command)

    def handle_command(self, command: str):
        """Process one line of user input."""
        if command == "q":
            self.is_running = False
        elif command == "r":
            self._restart()
        elif command == "m":
            self._toggle_mode()
        elif command.isdigit():
            try:
                self.driver.handle_cell(int(command))
            except IllegalMove as e:
                print(f"WARNING: {e.reason}")
        elif command:
            print(f"Unknown command: {command}")

        if self.is_running and self.driver.game_state.is_game_over:
            print("Game over! 'r' to play again, 'q' to quit")

    def _restart(self):
        print("\nResetting game...")
        self.driver.restart()
        self.driver.game_state.print_board()

    def _toggle_mode(self):
        if self.driver.mode == GameMode.TWO_PLAYER:
            mode = GameMode.VS_COMPUTER
        else:
            mode = GameMode.TWO_PLAYER
        print(f"\nMode set to: {mode.value}")
        self.driver.set_mode(mode)
        self.driver.game_state.print_board()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--vs-ai",
        action="store_true",
        help="Play against the computer (you are X)"
    )
    parser.add_argument(
        "--ai-delay",
        type=int,
        default=GameConfig.AI_DELAY_MS,
        help="Milliseconds the computer waits before moving"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )

    args = parser.parse_args(argv)

    config = GameConfig()
    config.AI_DELAY_MS = max(0, args.ai_delay)
    config.RANDOM_SEED = args.seed

    mode = GameMode.VS_COMPUTER if args.vs_ai else GameMode.TWO_PLAYER

    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(mode=mode, game_config=config)
        ui.run()
        return 0

    console = TicTacToeConsole(mode=mode, config=config)
    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
