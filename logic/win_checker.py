"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple

import numpy as np

from .game_state import Cell, Move, Player


class WinChecker:
    """
    Checks for win conditions on a 3x3 grid of Cell values.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, in the order they are checked
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    # Same lines as flat indices into a row-major grid, shape (8, 3)
    _LINE_INDICES = np.array(
        [[row * 3 + col for row, col in line] for line in WINNING_LINES]
    )

    def _complete_lines(self, grid: np.ndarray) -> np.ndarray:
        """Indices (into WINNING_LINES) of lines filled by a single player."""
        lines = grid.ravel()[self._LINE_INDICES]
        first = lines[:, 0]
        complete = (
            (first != Cell.EMPTY)
            & (first == lines[:, 1])
            & (first == lines[:, 2])
        )
        return np.flatnonzero(complete)

    def check_winner(self, grid: np.ndarray) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            grid: 3x3 array of Cell values.

        Returns:
            The player owning the first complete line, or None.
        """
        complete = self._complete_lines(grid)
        if complete.size == 0:
            return None

        row, col = self.WINNING_LINES[complete[0]][0]
        return Cell(int(grid[row, col])).player

    def get_winning_line(self, grid: np.ndarray) -> Optional[List[Move]]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line as a list of Moves, or None.
        """
        complete = self._complete_lines(grid)
        if complete.size == 0:
            return None
        return [Move(row, col) for row, col in self.WINNING_LINES[complete[0]]]

    def is_full(self, grid: np.ndarray) -> bool:
        """True if no empty cells remain."""
        return not bool(np.any(grid == Cell.EMPTY))

    def check_draw(self, grid: np.ndarray) -> bool:
        """
        Check if the game is a draw: board full AND no winner.

        A full board with a complete line is a win, never a draw.
        """
        if self.check_winner(grid) is not None:
            return False
        return self.is_full(grid)

    def count_wins(self, grid: np.ndarray) -> Tuple[int, int]:
        """
        Count complete lines per player as (x_lines, o_lines).

        Under legal alternating play at most one player can have any.
        """
        x_lines = o_lines = 0
        for index in self._complete_lines(grid):
            row, col = self.WINNING_LINES[index][0]
            if grid[row, col] == Cell.X:
                x_lines += 1
            else:
                o_lines += 1
        return x_lines, o_lines
