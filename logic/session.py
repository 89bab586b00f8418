"""
Game session for TicTacToe.

The functions here are what a driver (console, GUI, ...) talks to:
new_game, apply_human_move, computer_move and status. GameSession wraps
them for a single human-vs-computer game and adds turn tracking, move
history and restart.
"""

from typing import List, Optional, Tuple

from .ai_player import AIPlayer
from .board import Board
from .config import GameConfig
from .errors import GameOverError, NotYourTurnError
from .game_state import GameStatus, Move, Player
from .move_validator import MoveValidator


def new_game() -> Board:
    """A fresh, empty board for one game."""
    return Board()


def apply_human_move(board: Board, row: int, col: int, player: Player = Player.X) -> Board:
    """
    Apply a human move to the board.

    Raises:
        OutOfRangeError, CellOccupiedError: The move is illegal; the board is unchanged.
    """
    return board.apply_move(row, col, player)


def computer_move(board: Board, player: Player = Player.O,
                  ai: Optional[AIPlayer] = None) -> Tuple[Board, Move]:
    """
    Find and apply the computer's best move.

    Args:
        board: Current board, with player to move.
        player: Which side the computer plays.
        ai: Engine to reuse between moves. A new one is made if omitted.

    Returns:
        (board, move played)

    Raises:
        NoLegalMoveError: The game is already over.
    """
    if ai is None or ai.player != player:
        ai = AIPlayer(player)
    move = ai.get_best_move(board)
    board.apply_move(move.row, move.col, player)
    return board, move


def status(board: Board) -> GameStatus:
    return board.status()


class GameSession:
    """
    One human-vs-computer game at a time.

    Game flow:
    1. restart() gives a fresh board
    2. The side configured as FIRST_MOVER plays first
    3. human_move() and computer_move() alternate
    4. Repeat until someone wins or it's a draw; restart() to play again
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

        self.human_player = self.config.HUMAN_PLAYER
        self.computer_player = self.config.COMPUTER_PLAYER
        self.first_mover = self.config.FIRST_MOVER

        self.ai = AIPlayer(self.computer_player, self.config)
        self._hint_ai = AIPlayer(self.human_player, self.config)
        self.validator = MoveValidator()

        self.board = new_game()
        self.history: List[Tuple[Player, Move]] = []

    @property
    def current_player(self) -> Player:
        """Whose turn it is, derived from the marks on the board."""
        return self.board.next_player(self.first_mover)

    @property
    def status(self) -> GameStatus:
        return self.board.status()

    @property
    def is_over(self) -> bool:
        return self.status.is_over

    @property
    def is_computer_turn(self) -> bool:
        return not self.is_over and self.current_player == self.computer_player

    def _check_turn(self, player: Player):
        current_status = self.status
        if current_status.is_over:
            raise GameOverError(current_status)

        expected = self.current_player
        if player != expected:
            raise NotYourTurnError(player, expected)

    def human_move(self, row: int, col: int) -> GameStatus:
        """
        Apply the human's move.

        Returns:
            Status after the move.

        Raises:
            GameOverError, NotYourTurnError, OutOfRangeError, CellOccupiedError.
            The board is unchanged and it is still the human's turn.
        """
        self._check_turn(self.human_player)

        result = self.validator.validate_move(self.board, row, col)
        if not result.is_valid:
            raise result.error

        apply_human_move(self.board, row, col, self.human_player)
        self.history.append((self.human_player, Move(row, col)))
        return self.status

    def computer_move(self) -> Move:
        """
        Let the computer play its move.

        Returns:
            The move played.

        Raises:
            GameOverError, NotYourTurnError.
        """
        self._check_turn(self.computer_player)
        _, move = computer_move(self.board, self.computer_player, self.ai)
        self.history.append((self.computer_player, move))
        return move

    def suggest_move(self) -> str:
        """Hint for the human: the move the engine would play in their place."""
        return self._hint_ai.get_move_suggestion(self.board)

    def restart(self):
        """Throw away the current game and start a new one."""
        self.board = new_game()
        self.history.clear()
