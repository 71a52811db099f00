"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw, and runs
the turn sequence (move -> win? -> draw? -> next player).
"""

from enum import Enum
from typing import Optional, Tuple, Union
from dataclasses import dataclass

import numpy as np

from .game_state import GameState, Board, Mark, EMPTY
from .move_validator import MoveValidator, ValidationResult


class TurnOutcome(Enum):
    """What happened after a move was submitted."""
    REJECTED = "rejected"
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"


@dataclass
class TurnResult:
    """Result of one turn."""
    outcome: TurnOutcome
    index: Optional[int] = None
    mark: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    validation: Optional[ValidationResult] = None

    @property
    def accepted(self) -> bool:
        return self.outcome != TurnOutcome.REJECTED


def _as_board(target: Union[Board, GameState]) -> Board:
    return target.board if isinstance(target, GameState) else target


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell indices), in scan order
    WINNING_LINES = np.array([
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ], dtype=np.intp)

    def __init__(self):
        self.validator = MoveValidator()

        # Line found by the last check_win call (for highlighting)
        self.winning_line: Optional[Tuple[int, int, int]] = None

    def get_winning_line(self, target: Union[Board, GameState]) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            target: A board or game state.

        Returns:
            The first complete line as three cell indices, or None.
        """
        lines = _as_board(target).cells[self.WINNING_LINES]

        complete = (
            (lines[:, 0] != EMPTY)
            & (lines[:, 0] == lines[:, 1])
            & (lines[:, 1] == lines[:, 2])
        )
        hits = np.flatnonzero(complete)
        if hits.size == 0:
            return None

        a, b, c = self.WINNING_LINES[hits[0]]
        return int(a), int(b), int(c)

    def check_win(self, target: Union[Board, GameState]) -> bool:
        """
        Check if any line holds three equal marks.

        Also remembers the line in self.winning_line.
        """
        self.winning_line = self.get_winning_line(target)
        return self.winning_line is not None

    def check_winner(self, target: Union[Board, GameState]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        board = _as_board(target)
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def check_draw(self, target: Union[Board, GameState]) -> bool:
        """
        Check if the board is full.

        Only meaningful after check_win() came back False - a full
        board with a line on it is a win, not a draw.
        """
        return _as_board(target).is_full()

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with winner/draw information.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        if self.check_win(game_state):
            game_state.end(game_state.board[self.winning_line[0]], self.winning_line)
        elif self.check_draw(game_state):
            game_state.end(None)

        return game_state

    def play_turn(self, game_state: GameState, index: int) -> TurnResult:
        """
        Play one move for the current player.

        Order: apply move -> win ends the round -> full board ends
        the round as a draw -> otherwise the other player is up.

        Args:
            game_state: State to play on (mutated).
            index: Cell index (0-8).

        Returns:
            TurnResult describing the outcome.
        """
        mark = game_state.current_player
        validation = self.validator.validate_move(game_state, index, mark)
        if not validation.is_valid:
            return TurnResult(
                outcome=TurnOutcome.REJECTED,
                index=index,
                mark=mark,
                validation=validation
            )

        game_state.apply_move(index, mark)

        if self.check_win(game_state):
            game_state.end(mark, self.winning_line)
            return TurnResult(
                outcome=TurnOutcome.WIN,
                index=index,
                mark=mark,
                winning_line=self.winning_line,
                validation=validation
            )

        if self.check_draw(game_state):
            game_state.end(None)
            return TurnResult(outcome=TurnOutcome.DRAW, index=index, mark=mark, validation=validation)

        game_state.switch_player()
        return TurnResult(outcome=TurnOutcome.CONTINUE, index=index, mark=mark, validation=validation)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    board = Board.from_list(["X", "X", "X", "", "O", "", "O", "", ""])
    print(f"Test 1 (row): winner = {checker.check_winner(board)}, line = {checker.get_winning_line(board)}")

    board = Board.from_list(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    print(f"Test 2 (full): win = {checker.check_win(board)}, draw = {checker.check_draw(board)}")

    print("\nWinChecker test done!")
