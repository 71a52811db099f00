"""
AI player for TicTacToe.
Picks the computer's move with a fixed-priority heuristic.
"""

import random
from enum import Enum
from typing import Optional, List

from .config import GameConfig
from .game_state import Board, Mark
from .win_checker import WinChecker


# Returned when there is no empty cell left
NO_MOVE = -1


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"         # Random moves
    MEDIUM = "medium"     # Coin flip between Easy and Hard
    HARD = "hard"         # Win, block, center, corner, edge

    @classmethod
    def parse(cls, value) -> Optional["Difficulty"]:
        """Get a Difficulty from an enum or its name/value, or None."""
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class AIPlayer:
    """
    A TicTacToe opponent driven by a simple rule list.

    Hard play, in order:
    1. Win now if a move completes a line
    2. Block the opponent's winning cell
    3. Take the center
    4. Take a random free corner
    5. Take a random free edge

    This is not a full game-tree search, so it can be beaten.
    """

    def __init__(
        self,
        player: Mark = Mark.O,
        rng: Optional[random.Random] = None,
        config: Optional[GameConfig] = None,
        verbose: bool = False
    ):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI places (default: O)
            rng: Random source for tie-breaks (seed it for tests)
            config: Game settings.
            verbose: Print each decision.
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random()
        self.config = config or GameConfig()
        self.verbose = verbose
        self.win_checker = WinChecker()

    def get_move(
        self,
        board: Board,
        difficulty: Optional[Difficulty],
        opponent: Optional[Mark] = None
    ) -> int:
        """
        Get the AI's move for a difficulty.

        Args:
            board: Current board. Left unchanged.
            difficulty: EASY, MEDIUM or HARD. Anything else plays EASY.
            opponent: The other player's mark (default: opposite of ours).

        Returns:
            Cell index, or NO_MOVE if the board is full.
        """
        difficulty = Difficulty.parse(difficulty)

        if difficulty == Difficulty.HARD:
            move = self.get_best_move(board, opponent)
        elif difficulty == Difficulty.MEDIUM:
            move = self.get_medium_move(board, opponent)
        else:
            move = self.get_random_move(board)

        if self.verbose:
            label = difficulty.value if difficulty else "default"
            print(f"AI ({self.player.value}, {label}) picks cell {move}")

        return move

    def get_random_move(self, board: Board) -> int:
        """Get a random empty cell (easy difficulty)."""
        empty_cells = board.empty_cells()
        return self.rng.choice(empty_cells) if empty_cells else NO_MOVE

    def get_medium_move(self, board: Board, opponent: Optional[Mark] = None) -> int:
        """Get a somewhat strategic move (medium difficulty)."""
        # One coin flip per move: best move or a random one
        if self.rng.random() < self.config.MEDIUM_BEST_MOVE_CHANCE:
            return self.get_best_move(board, opponent)
        return self.get_random_move(board)

    def get_best_move(self, board: Board, opponent: Optional[Mark] = None) -> int:
        """
        Get the heuristic move (hard difficulty).

        Args:
            board: Current board. Trial placements are undone.
            opponent: The other player's mark.

        Returns:
            Cell index, or NO_MOVE if the board is full.
        """
        opponent = opponent or self.player.opposite()

        move = self._find_winning_cell(board, self.player)
        if move != NO_MOVE:
            return move

        move = self._find_winning_cell(board, opponent)
        if move != NO_MOVE:
            return move

        if board.is_empty(self.config.CENTER):
            return self.config.CENTER

        for cells in (self.config.CORNERS, self.config.EDGES):
            free = self._free_cells(board, cells)
            if free:
                return self.rng.choice(free)

        return NO_MOVE

    def _find_winning_cell(self, board: Board, mark: Mark) -> int:
        """First empty cell (ascending) where `mark` would complete a line."""
        for index in board.empty_cells():
            board.place(index, mark)
            try:
                wins = self.win_checker.check_win(board)
            finally:
                board.clear(index)
            if wins:
                return index
        return NO_MOVE

    def _free_cells(self, board: Board, cells) -> List[int]:
        return [index for index in cells if board.is_empty(index)]


def choose_move(
    board: Board,
    difficulty: Optional[Difficulty],
    computer_mark: Mark,
    player_mark: Mark,
    rng: Optional[random.Random] = None
) -> int:
    """
    Choose the computer's cell for one turn.

    Returns:
        An empty cell index, or NO_MOVE when the board is full.
    """
    return AIPlayer(computer_mark, rng=rng).get_move(board, difficulty, player_mark)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O, verbose=True)

    board = Board.from_list(["X", "X", "", "", "O", "", "", "", ""])
    print(board)
    move = ai.get_best_move(board)
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    board = Board.from_list(["X", "X", "", "O", "O", "", "", "", ""])
    print(board)
    move = ai.get_best_move(board)
    assert move == 5, f"Expected 5, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
