"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Dict, Optional, Tuple

from .board import Board
from .config import GameConfig
from .errors import NoLegalMoveError
from .game_state import Move, Player, StatusKind


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search always runs to the end of the game and never prunes, so the
    AI wins if possible, blocks the opponent if needed, and never loses.
    Among equally good moves the first one in row-major order is played.
    """

    def __init__(self, player: Player = Player.O, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI maximizes for (default: O)
            config: Engine settings. Defaults to GameConfig().
        """
        self.player = player
        self.opponent = player.opposite()
        self.config = config or GameConfig()

        # Scores keyed by (grid bytes, depth, is_maximizing). A score only
        # depends on those three, so entries stay valid across searches.
        self._cache: Dict[Tuple[bytes, int, bool], int] = {}

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> Move:
        """
        Get the best move for the current position.

        Every trial mark is removed again, so the board is returned to the
        caller exactly as it was passed in.

        Args:
            board: Current board, with self.player to move.

        Returns:
            (row, col) of the best move.

        Raises:
            NoLegalMoveError: The board is full or already won.
        """
        self.moves_evaluated = 0

        valid_moves = board.empty_cells()
        if not valid_moves or board.is_terminal():
            raise NoLegalMoveError(f"No legal move for {self.player.value}: game is over ({board.status()})")

        best_score = None
        best_move = valid_moves[0]

        for row, col in valid_moves:
            # Try this move
            board.apply_move(row, col, self.player)
            try:
                score = self.minimax(board, depth=0, is_maximizing=False)
            finally:
                board.clear_cell(row, col)

            # Strictly better only: ties keep the earliest move
            if best_score is None or score > best_score:
                best_score = score
                best_move = Move(row, col)

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.moves_evaluated} positions. Best move: {tuple(best_move)} (score: {best_score})")

        return best_move

    def minimax(self, board: Board, depth: int, is_maximizing: bool) -> int:
        """
        Minimax score of a position from self.player's point of view.

        Args:
            board: Position to evaluate. Trial marks placed here are undone.
            depth: Plies played since the root of the search.
            is_maximizing: True if self.player moves next.

        Returns:
            WIN_SCORE - depth for a win, depth - WIN_SCORE for a loss, 0 for a draw.
        """
        self.moves_evaluated += 1

        if not self.config.USE_CACHE:
            return self._evaluate(board, depth, is_maximizing)

        key = (board.to_bytes(), depth, is_maximizing)
        score = self._cache.get(key)
        if score is None:
            score = self._evaluate(board, depth, is_maximizing)
            self._cache[key] = score
        return score

    def _evaluate(self, board: Board, depth: int, is_maximizing: bool) -> int:
        # Check terminal states
        status = board.status()

        if status.winner == self.player:
            return self.config.WIN_SCORE - depth  # Win (prefer faster wins)
        elif status.winner == self.opponent:
            return depth - self.config.WIN_SCORE  # Loss (prefer slower losses)
        elif status.kind == StatusKind.DRAW:
            return 0

        if is_maximizing:
            max_score = None
            for row, col in board.empty_cells():
                board.apply_move(row, col, self.player)
                try:
                    score = self.minimax(board, depth + 1, False)
                finally:
                    board.clear_cell(row, col)
                if max_score is None or score > max_score:
                    max_score = score
            return max_score
        else:
            min_score = None
            for row, col in board.empty_cells():
                board.apply_move(row, col, self.opponent)
                try:
                    score = self.minimax(board, depth + 1, True)
                finally:
                    board.clear_cell(row, col)
                if min_score is None or score < min_score:
                    min_score = score
            return min_score

    def clear_cache(self):
        self._cache.clear()

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: Current board, with self.player to move.

        Returns:
            A string describing the suggested move.
        """
        if board.is_terminal():
            return "No moves available!"

        row, col = self.get_best_move(board)
        return f"Place {self.player.value} at ({row}, {col})"


def best_move(board: Board, mover: Player, config: Optional[GameConfig] = None) -> Move:
    """Best move for mover on board. See AIPlayer.get_best_move."""
    return AIPlayer(mover, config).get_best_move(board)
