"""
Game configuration for TicTacToe.
Who plays which side, who opens, and engine settings.
"""

from .game_state import Player


class GameConfig:
    """
    Configuration class for game settings.
    Class attributes are the defaults; pass keyword arguments to override
    them on one instance, e.g. GameConfig(DEBUG_MODE=True).
    """

    # ==================== PLAYERS ====================
    HUMAN_PLAYER = Player.X
    COMPUTER_PLAYER = Player.O

    # The computer opens the game
    FIRST_MOVER = Player.O

    # ==================== ENGINE SETTINGS ====================
    # Score of an immediate win; wins found deeper score WIN_SCORE - depth
    WIN_SCORE = 10

    # Cache position scores within one search (same result, much faster)
    USE_CACHE = True

    # ==================== DRIVER SETTINGS ====================
    # Pause before the computer replies, in seconds (console driver only)
    AI_MOVE_DELAY_S = 0.5

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not name.isupper() or not hasattr(type(self), name):
                raise AttributeError(f"Unknown config setting: {name}")
            setattr(self, name, value)

        if self.HUMAN_PLAYER == self.COMPUTER_PLAYER:
            raise ValueError("HUMAN_PLAYER and COMPUTER_PLAYER must be different")
