"""
Board for TicTacToe.
Owns the 3x3 grid and derives the game status from it.
"""

from typing import Iterable, List, Optional

import numpy as np

from .errors import CellOccupiedError, OutOfRangeError
from .game_state import Cell, GameStatus, Move, Player
from .win_checker import WinChecker


# Characters accepted by Board.from_rows
_SYMBOLS = {
    "X": Cell.X,
    "O": Cell.O,
    "_": Cell.EMPTY,
    ".": Cell.EMPTY,
    "-": Cell.EMPTY,
}


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are stored row-major in a numpy int8 array holding Cell values.
    The board is mutated in place by apply_move(); status is never cached,
    it is recomputed from the grid on every call.
    """

    SIZE = 3

    win_checker = WinChecker()

    def __init__(self, grid: Optional[Iterable] = None):
        """
        Create a board.

        Args:
            grid: Optional 3x3 nested sequence of Cell values. Empty board if omitted.
        """
        if grid is None:
            self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
            return

        grid = np.array(grid, dtype=np.int8)
        if grid.shape != (self.SIZE, self.SIZE):
            raise ValueError(f"Board must be {self.SIZE}x{self.SIZE}, got shape {grid.shape}")
        if np.any((grid < Cell.EMPTY) | (grid > Cell.O)):
            raise ValueError("Board cells must be Cell values (0, 1 or 2)")
        self.grid = grid

    @classmethod
    def from_rows(cls, *rows: str) -> "Board":
        """
        Build a board from three row strings, e.g. from_rows("XX_", "_O_", "___").
        Whitespace is ignored; "_", "." and "-" mean empty.
        """
        if len(rows) != cls.SIZE:
            raise ValueError(f"Expected {cls.SIZE} rows, got {len(rows)}")

        grid = []
        for text in rows:
            symbols = "".join(text.split()).upper()
            if len(symbols) != cls.SIZE:
                raise ValueError(f"Row {text!r} must have {cls.SIZE} cells")
            try:
                grid.append([_SYMBOLS[s] for s in symbols])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r} in row {text!r}") from None
        return cls(grid)

    def _check_coords(self, row, col):
        valid = all(
            isinstance(v, (int, np.integer)) and not isinstance(v, bool) and 0 <= v < self.SIZE
            for v in (row, col)
        )
        if not valid:
            raise OutOfRangeError(row, col)

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get the state of a cell.

        Raises:
            OutOfRangeError: row or col is not in 0-2.
        """
        self._check_coords(row, col)
        return Cell(int(self.grid[row, col]))

    def apply_move(self, row: int, col: int, player: Player) -> "Board":
        """
        Place a player's mark on an empty cell.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            player: Whose mark to place.

        Returns:
            This board, for chaining.

        Raises:
            OutOfRangeError: Coordinates outside the board.
            CellOccupiedError: The cell already holds a mark. The board is unchanged.
        """
        current = self.cell_at(row, col)
        if current != Cell.EMPTY:
            raise CellOccupiedError(row, col, current.player.value)

        self.grid[row, col] = player.cell
        return self

    def clear_cell(self, row: int, col: int):
        """Reset a cell to empty. Used to undo trial moves during search."""
        self._check_coords(row, col)
        self.grid[row, col] = Cell.EMPTY

    def empty_cells(self) -> List[Move]:
        """All empty cells, in row-major order."""
        return [Move(int(row), int(col)) for row, col in np.argwhere(self.grid == Cell.EMPTY)]

    def count(self, player: Player) -> int:
        """Number of cells holding this player's mark."""
        return int(np.count_nonzero(self.grid == player.cell))

    def next_player(self, first_mover: Player) -> Player:
        """Whose turn it is, assuming first_mover opened and turns alternated."""
        if self.count(first_mover) > self.count(first_mover.opposite()):
            return first_mover.opposite()
        return first_mover

    def winner(self) -> Optional[Player]:
        """
        The player owning the first complete line, checked in the order
        rows 0-2, columns 0-2, main diagonal, anti-diagonal. None if no line is complete.
        """
        return self.win_checker.check_winner(self.grid)

    def winning_line(self) -> Optional[List[Move]]:
        return self.win_checker.get_winning_line(self.grid)

    def is_full(self) -> bool:
        return self.win_checker.is_full(self.grid)

    def status(self) -> GameStatus:
        """
        Derive the game status. A win is reported before a draw, so a full
        board with a complete line is a win.
        """
        winner = self.winner()
        if winner is not None:
            return GameStatus.win(winner)
        if self.is_full():
            return GameStatus.draw()
        return GameStatus.in_progress()

    def is_terminal(self) -> bool:
        return self.status().is_over

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self.grid.copy())

    def to_bytes(self) -> bytes:
        """Raw grid contents; equal bytes mean identical boards."""
        return self.grid.tobytes()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self):
        rows = ["".join(Cell(int(v)).symbol for v in row) for row in self.grid]
        return f"Board.from_rows({', '.join(repr(r) for r in rows)})"

    def __str__(self):
        lines = ["    0   1   2"]
        for row in range(self.SIZE):
            marks = [Cell(int(v)).name if v != Cell.EMPTY else " " for v in self.grid[row]]
            lines.append(f"{row}   " + " | ".join(marks))
            if row < self.SIZE - 1:
                lines.append("   ---+---+---")
        return "\n".join(lines)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self)
