"""
Logic module for TicTacToe.
Handles the board, rules, and the unbeatable AI opponent.
"""

__version__ = "1.0.0"

from .game_state import Cell, GameStatus, Move, Player, StatusKind
from .errors import (
    CellOccupiedError,
    GameError,
    GameOverError,
    MoveError,
    NoLegalMoveError,
    NotYourTurnError,
    OutOfRangeError,
)
from .board import Board
from .config import GameConfig
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, best_move
from .session import GameSession, apply_human_move, computer_move, new_game, status
