"""
Game state management for TicTacToe.
Tracks the board, current player, and move history.
"""

from enum import Enum
from typing import Optional, List, Tuple, Iterable
from dataclasses import dataclass, field

import numpy as np


# Cell codes stored in the board array
EMPTY = 0
X_CODE = 1
O_CODE = 2

CELL_COUNT = 9


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X

    @property
    def code(self) -> int:
        """Cell code used in the board array."""
        return X_CODE if self == Mark.X else O_CODE

    @classmethod
    def from_code(cls, code: int) -> Optional["Mark"]:
        if code == X_CODE:
            return cls.X
        if code == O_CODE:
            return cls.O
        return None

    @classmethod
    def parse(cls, value) -> Optional["Mark"]:
        """
        Convert a loose cell value to a Mark.

        Accepts a Mark, "X"/"O" (any case), or an empty value
        ("", " ", None) which means an empty cell.
        """
        if isinstance(value, Mark):
            return value
        if value is None or str(value).strip() == "":
            return None
        return cls(str(value).strip().upper())


class MoveError(Enum):
    """Why a move was refused."""
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"
    INACTIVE_SESSION = "inactive_session"
    WRONG_TURN = "wrong_turn"


class Board:
    """
    The 3x3 board as a flat vector of 9 cells.

    Cells are numbered 0-8 row by row:

         0 | 1 | 2
         3 | 4 | 5
         6 | 7 | 8
    """

    def __init__(self, cells: Optional[np.ndarray] = None):
        if cells is None:
            self.cells = np.zeros(CELL_COUNT, dtype=np.int8)
        else:
            self.cells = np.array(cells, dtype=np.int8).reshape(CELL_COUNT)

    @classmethod
    def from_list(cls, values: Iterable) -> "Board":
        """Build a board from 9 values like ["X", "", "O", ...]."""
        values = list(values)
        if len(values) != CELL_COUNT:
            raise ValueError(f"Board needs {CELL_COUNT} cells, got {len(values)}")

        codes = []
        for value in values:
            mark = Mark.parse(value)
            codes.append(EMPTY if mark is None else mark.code)
        return cls(np.array(codes, dtype=np.int8))

    def __getitem__(self, index: int) -> Optional[Mark]:
        return Mark.from_code(int(self.cells[index]))

    def __len__(self) -> int:
        return CELL_COUNT

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def place(self, index: int, mark: Mark):
        self.cells[index] = mark.code

    def clear(self, index: int):
        self.cells[index] = EMPTY

    def is_empty(self, index: int) -> bool:
        return self.cells[index] == EMPTY

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells, ascending."""
        return np.flatnonzero(self.cells == EMPTY).tolist()

    def is_full(self) -> bool:
        return bool(np.all(self.cells != EMPTY))

    def count(self, mark: Mark) -> int:
        return int(np.count_nonzero(self.cells == mark.code))

    def copy(self) -> "Board":
        return Board(self.cells.copy())

    def tobytes(self) -> bytes:
        return self.cells.tobytes()

    def to_list(self) -> List[str]:
        """Cells as "X", "O" or "" (empty)."""
        result = []
        for code in self.cells:
            mark = Mark.from_code(int(code))
            result.append(mark.value if mark else "")
        return result

    def __repr__(self) -> str:
        return f"Board({self.to_list()!r})"

    def __str__(self) -> str:
        lines = ["┌───┬───┬───┐"]
        for row in range(3):
            row_str = "│"
            for col in range(3):
                index = row * 3 + col
                mark = self[index]
                # Empty cells show their number (1-9) for console play
                row_str += f" {mark.value if mark else index + 1} │"
            lines.append(row_str)
            if row < 2:
                lines.append("├───┼───┼───┤")
        lines.append("└───┴───┴───┘")
        return "\n".join(lines)


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    index: int              # Cell (0-8)
    move_number: int        # Ply count, starting at 0


@dataclass
class GameState:
    """
    The complete state of one TicTacToe round.

    Tracks:
    - The board (which marks are where)
    - Current player
    - Whether moves are still accepted
    - Move history
    - Round result (won, draw)
    """

    board: Board = field(default_factory=Board)

    # Current player's turn - X always opens
    current_player: Mark = Mark.X

    # False once the round is over (or before play starts)
    active: bool = True

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Round result
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None
    is_draw: bool = False

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw

    def check_move(self, index: int, mark: Mark) -> Optional[MoveError]:
        """
        Check whether a move is allowed.

        Args:
            index: Cell index (0-8).
            mark: The mark to place.

        Returns:
            The reason the move is refused, or None if it is allowed.
        """
        if not self.active:
            return MoveError.INACTIVE_SESSION

        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            return MoveError.OUT_OF_RANGE

        if not 0 <= index < CELL_COUNT:
            return MoveError.OUT_OF_RANGE

        if not self.board.is_empty(index):
            return MoveError.CELL_OCCUPIED

        if mark != self.current_player:
            return MoveError.WRONG_TURN

        return None

    def apply_move(self, index: int, mark: Mark) -> bool:
        """
        Place a mark on the board.

        Does not switch turns or look for a winner; see
        WinChecker.play_turn for the full turn sequence.

        Args:
            index: Cell index (0-8).
            mark: The mark to place.

        Returns:
            True if the mark was placed, False if the move was refused.
        """
        if self.check_move(index, mark) is not None:
            return False

        index = int(index)
        self.board.place(index, mark)
        self.moves.append(Move(mark=mark, index=index, move_number=len(self.moves)))
        return True

    def switch_player(self):
        """Hand the turn to the other mark."""
        self.current_player = self.current_player.opposite()

    def end(self, winner: Optional[Mark], winning_line: Optional[Tuple[int, int, int]] = None):
        """
        Close the round.

        Args:
            winner: The winning mark, or None for a draw.
            winning_line: The three cells of the win, if any.
        """
        self.active = False
        self.winner = winner
        self.winning_line = winning_line
        self.is_draw = winner is None

    def reset(self):
        """Empty the board and get ready for a new round."""
        self.board = Board()
        self.current_player = Mark.X
        self.active = True
        self.moves = []
        self.winner = None
        self.winning_line = None
        self.is_draw = False

    @property
    def last_move(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def get_empty_cells(self) -> List[int]:
        return self.board.empty_cells()

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board)

        if self.is_game_over:
            if self.winner:
                print(f"\n🏆 {self.winner.value} WINS!")
            else:
                print("\n🤝 It's a DRAW!")
        elif self.active:
            print(f"\nCurrent turn: {self.current_player.value}")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    for index in [4, 0, 2, 6, 3]:
        mark = game.current_player
        print(f"\n{mark.value} moves to {index}")
        game.apply_move(index, mark)
        game.switch_player()
        game.print_board()

    print("\nGame state test done!")
