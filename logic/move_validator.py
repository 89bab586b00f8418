"""
Move validator for TicTacToe.
Checks moves against the rules without touching the board.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board
from .errors import CellOccupiedError, GameError, GameOverError, MoveError
from .game_state import Move, Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board (0-2)
    3. Can only place on empty cells
    4. Players alternate, starting with the first mover
    """

    def validate_move(self, board: Board, row: int, col: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and the error the move would raise.
        """
        # Check if game is over
        status = board.status()
        if status.is_over:
            return ValidationResult(is_valid=False, error=GameOverError(status))

        # Check range and occupancy the same way apply_move does
        try:
            cell = board.cell_at(row, col)
        except MoveError as e:
            return ValidationResult(is_valid=False, error=e)

        if cell.player is not None:
            return ValidationResult(
                is_valid=False,
                error=CellOccupiedError(row, col, cell.player.value)
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def validate_turn_order(self, board: Board, first_mover: Player) -> ValidationResult:
        """
        Check that the marks on the board are consistent with alternating
        turns: the first mover has the same number of marks as the other
        player, or exactly one more.
        """
        diff = board.count(first_mover) - board.count(first_mover.opposite())
        if diff not in (0, 1):
            return ValidationResult(
                is_valid=False,
                error=GameError(
                    f"Board is not reachable with {first_mover.value} moving first "
                    f"({first_mover.value}-count minus {first_mover.opposite().value}-count is {diff})"
                )
            )

        x_lines, o_lines = board.win_checker.count_wins(board.grid)
        if x_lines and o_lines:
            return ValidationResult(
                is_valid=False,
                error=GameError("Board has complete lines for both players")
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[Move]:
        """
        Get all valid moves.

        Returns:
            Empty cells in row-major order, or [] if the game is over.
        """
        if board.is_terminal():
            return []
        return board.empty_cells()
