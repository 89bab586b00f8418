"""
Game state types for TicTacToe.
Players, cell values, moves and the derived game status.
"""

from enum import Enum, IntEnum
from typing import NamedTuple, Optional
from dataclasses import dataclass


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def cell(self) -> "Cell":
        """The cell value this player's mark is stored as."""
        return Cell.X if self == Player.X else Cell.O


class Cell(IntEnum):
    """
    State of a single board cell.

    Integer valued so a whole board fits in a small numpy array.
    """
    EMPTY = 0
    X = 1
    O = 2

    @property
    def player(self) -> Optional[Player]:
        """The player occupying this cell, or None if empty."""
        if self == Cell.X:
            return Player.X
        if self == Cell.O:
            return Player.O
        return None

    @property
    def symbol(self) -> str:
        return "_" if self == Cell.EMPTY else self.name


class Move(NamedTuple):
    """A (row, col) position on the board, both 0-2."""
    row: int
    col: int


class StatusKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Outcome of a board: in progress, won by a player, or drawn.

    Always derived from the board contents, never stored alongside it.
    """
    kind: StatusKind
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "GameStatus":
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def win(cls, player: Player) -> "GameStatus":
        return cls(StatusKind.WIN, player)

    @classmethod
    def draw(cls) -> "GameStatus":
        return cls(StatusKind.DRAW)

    @property
    def is_over(self) -> bool:
        return self.kind != StatusKind.IN_PROGRESS

    @property
    def message(self) -> str:
        """Text shown to the player when the game ends."""
        if self.kind == StatusKind.WIN:
            return f"{self.winner.value} Wins!"
        if self.kind == StatusKind.DRAW:
            return "Tie"
        return ""

    def __str__(self) -> str:
        return self.message or "In progress"
