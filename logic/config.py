"""
Game configuration for TicTacToe.
Board geometry, opponent tuning, and UI settings.
"""

from typing import Tuple

from .game_state import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the opponent or the UI!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells numbered 0-8 row by row
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE

    CENTER = 4
    CORNERS = (0, 2, 6, 8)
    EDGES = (1, 3, 5, 7)

    # ==================== PLAYER SETTINGS ====================
    # The human plays X and opens, unless the computer goes first
    HUMAN_MARK = Mark.X
    COMPUTER_MARK = Mark.O

    # ==================== OPPONENT SETTINGS ====================
    # Chance that Medium plays the Hard move instead of a random one
    MEDIUM_BEST_MOVE_CHANCE = 0.5

    # Used when a computer game starts without a chosen difficulty
    DEFAULT_DIFFICULTY = "easy"

    # Pause before the computer replies (milliseconds, UI only)
    COMPUTER_DELAY_MS = 500

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    BG_COLOR = '#1a1a2e'
    CELL_COLOR = '#16213e'
    X_COLOR = '#f87171'
    O_COLOR = '#10b981'
    WIN_COLOR = '#fbbf24'
    FONT = 'Segoe UI'

    DIFFICULTY_COLORS = {
        "easy": '#4ade80',
        "medium": '#fbbf24',
        "hard": '#f87171',
    }

    def marks(self, computer_first: bool = False) -> Tuple[Mark, Mark]:
        """
        Get the (human, computer) marks.

        Args:
            computer_first: If True, the computer takes X and opens.

        Returns:
            Tuple of (human_mark, computer_mark).
        """
        if computer_first:
            return self.COMPUTER_MARK, self.HUMAN_MARK
        return self.HUMAN_MARK, self.COMPUTER_MARK
