"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, Mark, MoveError


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be 0-8
    2. Can only place on empty cells
    3. Marks alternate, X first
    4. Round must still be active
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        mark: Optional[Mark] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).
            mark: Mark being placed (default: the current player's).

        Returns:
            ValidationResult with is_valid and the error, if any.
        """
        if mark is None:
            mark = game_state.current_player

        error = game_state.check_move(index, mark)
        if error is None:
            return ValidationResult(is_valid=True)

        return ValidationResult(
            is_valid=False,
            error=error,
            error_message=self._describe(error, game_state, index, mark)
        )

    def _describe(self, error: MoveError, game_state: GameState, index, mark: Mark) -> str:
        if error == MoveError.INACTIVE_SESSION:
            return "Game is not active!"
        if error == MoveError.OUT_OF_RANGE:
            return f"Invalid cell {index}. Must be 0-8."
        if error == MoveError.CELL_OCCUPIED:
            return f"Cell {index} is already occupied by {game_state.board[index].value}"
        return f"It's {game_state.current_player.value}'s turn, not {mark.value}'s!"

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of valid cell indices.
        """
        if not game_state.active:
            return []

        return game_state.get_empty_cells()
