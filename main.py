"""
Console driver for TicTacToe.

Play against the unbeatable computer in a terminal:
- Type "row col" (e.g. "1 1") to place your mark
- 'h' for a hint, 'r' to restart, 'q' to quit

Run this script to play TicTacToe against the computer!
"""

import time
from typing import Callable, Optional, Tuple

from logic.config import GameConfig
from logic.errors import MoveError
from logic.session import GameSession


def parse_command(text: str) -> Optional[Tuple]:
    """
    Parse one line of player input.

    Returns:
        ("move", row, col), ("hint",), ("restart",), ("quit",),
        or None if the line is not understood.
    """
    text = text.strip().lower()
    if text in ("q", "quit", "exit"):
        return ("quit",)
    if text in ("r", "restart"):
        return ("restart",)
    if text in ("h", "hint"):
        return ("hint",)

    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return ("move", row, col)


class ConsoleGame:
    """
    Main controller for a console game.

    Game flow:
    1. The computer (O) opens by default
    2. Human (X) types a move
    3. After a short pause the computer replies
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_func: Callable[[str], str] = input,
        sleep_func: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the console game.

        Args:
            config: Game settings.
            input_func: Reads one line of input (replaceable for tests).
            sleep_func: Pause before the computer moves (replaceable for tests).
        """
        self.config = config or GameConfig()
        self.session = GameSession(self.config)
        self.input_func = input_func
        self.sleep_func = sleep_func
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\nStarting TicTacToe game...")
        print(f"You play {self.session.human_player.value}, "
              f"the computer plays {self.session.computer_player.value}.")
        print("Enter 'row col' (0-2) to move, 'h' for a hint, 'r' to restart, 'q' to quit\n")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            if self.session.is_computer_turn:
                self._computer_move()
                continue

            if self.session.is_over:
                self._show_game_result()
                answer = self.input_func("Play again? [y/N] ").strip().lower()
                if answer in ("y", "yes", "r"):
                    self._reset_game()
                    continue
                self.is_running = False
                break

            self.session.board.print_board()
            command = parse_command(self.input_func(f"\n{self.session.human_player.value} to move> "))
            self._handle_command(command)

    def _handle_command(self, command: Optional[Tuple]):
        if command is None:
            print("Please enter a move as 'row col', e.g. '1 1'.")
        elif command[0] == "quit":
            print("\nGame quit by user.")
            self.is_running = False
        elif command[0] == "restart":
            self._reset_game()
        elif command[0] == "hint":
            print(f"Hint: {self.session.suggest_move()}")
        else:
            _, row, col = command
            self._process_human_move(row, col)

    def _process_human_move(self, row: int, col: int):
        """
        Apply a move typed by the human. Illegal moves are reported and the
        human is asked again.
        """
        try:
            self.session.human_move(row, col)
        except MoveError as e:
            print(f"Invalid move: {e}")
            return

        print(f"\n>>> You placed {self.session.human_player.value} at ({row}, {col})")

    def _computer_move(self):
        """Execute the computer's move."""
        print("\n>>> Computer is thinking...")
        self.sleep_func(self.config.AI_MOVE_DELAY_S)

        move = self.session.computer_move()
        print(f">>> Computer placed {self.session.computer_player.value} at ({move.row}, {move.col})")

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        self.session.board.print_board()

        print(f"\n{self.session.status.message}")
        winner = self.session.status.winner
        if winner == self.session.human_player:
            print("Congratulations! You won!")
        elif winner == self.session.computer_player:
            print("Computer wins! Better luck next time!")
        else:
            print("It's a draw! Good game!")

        print("=" * 40)

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.session.restart()


def build_config(args) -> GameConfig:
    return GameConfig(
        FIRST_MOVER=GameConfig.HUMAN_PLAYER if args.human_first else GameConfig.COMPUTER_PLAYER,
        AI_MOVE_DELAY_S=args.delay,
        USE_CACHE=not args.no_cache,
        DEBUG_MODE=args.debug,
    )


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable computer")
    parser.add_argument(
        "--human-first",
        action="store_true",
        help="Let the human (X) move first"
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=GameConfig.AI_MOVE_DELAY_S,
        help="Pause before the computer replies, in seconds"
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Search every position without caching scores (slower)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search statistics for every computer move"
    )

    args = parser.parse_args(argv)

    game = ConsoleGame(build_config(args))

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
