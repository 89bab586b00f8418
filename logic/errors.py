"""
Errors raised by the TicTacToe game logic.
"""


class GameError(Exception):
    """Base class for all game logic errors."""


class MoveError(GameError):
    """A move could not be applied. The board is left untouched."""


class OutOfRangeError(MoveError):
    def __init__(self, row, col):
        super().__init__(f"Invalid position ({row}, {col}). Must be 0-2.")
        self.row = row
        self.col = col


class CellOccupiedError(MoveError):
    def __init__(self, row, col, occupant):
        super().__init__(f"Cell ({row}, {col}) is already occupied by {occupant}")
        self.row = row
        self.col = col
        self.occupant = occupant


class GameOverError(MoveError):
    def __init__(self, status):
        super().__init__(f"Game is already over! ({status})")
        self.status = status


class NotYourTurnError(MoveError):
    def __init__(self, player, expected):
        super().__init__(f"It's not {player.value}'s turn! Waiting for {expected.value}.")
        self.player = player
        self.expected = expected


class NoLegalMoveError(GameError):
    """The move search was asked to play on a finished board."""
