"""
Tests for the TicTacToe game logic modules.

Run with pytest, or directly as a script:
    pytest test_modules.py -v
    python test_modules.py
"""

import random
import sys

from logic.ai_player import AIPlayer, Difficulty, NO_MOVE, choose_move
from logic.game_state import Board, GameState, Mark, MoveError
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, TurnOutcome


_ = ""


class FixedRandom:
    """Random source with scripted answers."""

    def __init__(self, value: float = 0.0):
        self.value = value
        self.random_calls = 0

    def random(self):
        self.random_calls += 1
        return self.value

    def choice(self, seq):
        return seq[-1]


# ==================== BOARD / GAME STATE ====================

def test_board_from_list_round_trip():
    board = Board.from_list(["X", " ", "o", None, Mark.X, "", _, _, "O"])
    assert board.to_list() == ["X", "", "O", "", "X", "", "", "", "O"]
    assert board[0] == Mark.X
    assert board[1] is None
    assert board.empty_cells() == [1, 3, 5, 6, 7]
    assert board.count(Mark.X) == 2
    assert board.count(Mark.O) == 2
    assert not board.is_full()


def test_board_copy_is_independent():
    board = Board.from_list(["X", _, _, _, _, _, _, _, _])
    copy = board.copy()
    copy.place(4, Mark.O)
    assert board.is_empty(4)
    assert board != copy


def test_apply_move_refuses_bad_moves():
    game = GameState()
    assert game.apply_move(4, Mark.X)
    game.switch_player()
    before = game.board.tobytes()

    assert game.check_move(4, Mark.O) == MoveError.CELL_OCCUPIED
    assert game.check_move(9, Mark.O) == MoveError.OUT_OF_RANGE
    assert game.check_move(-1, Mark.O) == MoveError.OUT_OF_RANGE
    assert game.check_move(0, Mark.X) == MoveError.WRONG_TURN
    assert not game.apply_move(4, Mark.O)

    game.active = False
    assert game.check_move(0, Mark.X) == MoveError.INACTIVE_SESSION
    assert not game.apply_move(0, Mark.X)

    assert game.board.tobytes() == before
    assert len(game.moves) == 1


def test_reset_clears_round():
    game = GameState()
    game.apply_move(0, Mark.X)
    game.switch_player()
    game.end(Mark.O)

    game.reset()
    assert game.board.empty_cells() == list(range(9))
    assert game.current_player == Mark.X
    assert game.active
    assert game.winner is None
    assert game.moves == []


# ==================== MOVE VALIDATOR ====================

def test_validator_reports_errors():
    game = GameState()
    validator = MoveValidator()

    assert validator.validate_move(game, 0).is_valid
    game.apply_move(0, Mark.X)
    game.switch_player()

    result = validator.validate_move(game, 0)
    assert not result.is_valid
    assert result.error == MoveError.CELL_OCCUPIED
    assert "occupied" in result.error_message

    result = validator.validate_move(game, 12)
    assert result.error == MoveError.OUT_OF_RANGE

    assert validator.get_valid_moves(game) == list(range(1, 9))
    game.active = False
    assert validator.get_valid_moves(game) == []


# ==================== WIN CHECKER ====================

def test_check_win_finds_every_line():
    checker = WinChecker()

    for line in checker.WINNING_LINES:
        for mark in Mark:
            board = Board()
            for index in line:
                board.place(int(index), mark)

            assert checker.check_win(board)
            assert checker.winning_line == tuple(int(i) for i in line)
            assert checker.check_winner(board) == mark


def test_check_win_false_without_line():
    checker = WinChecker()

    assert not checker.check_win(Board())
    assert checker.winning_line is None

    partial = Board.from_list(["X", "O", "X", _, "O", _, _, _, _])
    assert not checker.check_win(partial)
    assert checker.check_winner(partial) is None

    mixed = Board.from_list(["X", "X", "O", _, _, _, _, _, _])
    assert not checker.check_win(mixed)


def test_check_draw_only_when_full_without_win():
    checker = WinChecker()

    draw = Board.from_list(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    assert not checker.check_win(draw)
    assert checker.check_draw(draw)

    # Full board with a line is a win, not a draw
    full_win = GameState(board=Board.from_list(["O", "X", "X", "X", "O", "X", "X", "O", "O"]))
    checker.update_game_state(full_win)
    assert full_win.winner == Mark.O
    assert full_win.winning_line == (0, 4, 8)
    assert not full_win.is_draw

    assert not checker.check_draw(Board.from_list(["X", _, _, _, _, _, _, _, _]))


def test_play_turn_sequence():
    checker = WinChecker()
    game = GameState()

    outcomes = [checker.play_turn(game, index).outcome for index in [0, 4, 1, 5]]
    assert outcomes == [TurnOutcome.CONTINUE] * 4
    assert game.current_player == Mark.X

    result = checker.play_turn(game, 2)
    assert result.outcome == TurnOutcome.WIN
    assert result.winning_line == (0, 1, 2)
    assert game.winner == Mark.X
    assert game.current_player == Mark.X
    assert not game.active

    result = checker.play_turn(game, 8)
    assert result.outcome == TurnOutcome.REJECTED
    assert result.validation.error == MoveError.INACTIVE_SESSION


def test_play_turn_draw():
    checker = WinChecker()
    game = GameState()

    for index in [0, 1, 2, 4, 3, 5, 7, 6]:
        assert checker.play_turn(game, index).outcome == TurnOutcome.CONTINUE

    result = checker.play_turn(game, 8)
    assert result.outcome == TurnOutcome.DRAW
    assert game.is_draw
    assert game.winner is None
    assert not game.active


def test_mark_counts_stay_balanced():
    rng = random.Random(7)
    checker = WinChecker()

    for _round in range(200):
        game = GameState()
        while game.active:
            # Throw in some bad input too
            checker.play_turn(game, rng.randint(-2, 10))
            if not game.active:
                break
            checker.play_turn(game, rng.choice(game.get_empty_cells()))

            difference = game.board.count(Mark.X) - game.board.count(Mark.O)
            assert difference in (0, 1)


# ==================== AI PLAYER ====================

def test_hard_prefers_own_win_over_block():
    board = Board.from_list(["X", "X", _, "O", "O", _, _, _, _])
    ai = AIPlayer(Mark.O, rng=random.Random(0))
    assert ai.get_move(board, Difficulty.HARD) == 5


def test_hard_blocks_player_win():
    board = Board.from_list(["X", "X", _, "O", _, _, _, _, _])
    ai = AIPlayer(Mark.O, rng=random.Random(0))
    assert ai.get_move(board, Difficulty.HARD) == 2


def test_hard_takes_center_on_empty_board():
    ai = AIPlayer(Mark.O, rng=random.Random(0))
    assert ai.get_move(Board(), Difficulty.HARD) == 4
    assert choose_move(Board(), Difficulty.HARD, Mark.X, Mark.O) == 4


def test_hard_prefers_corners_before_edges():
    board = Board.from_list(["X", _, _, _, "O", _, _, _, _])

    picks = set()
    for seed in range(50):
        ai = AIPlayer(Mark.O, rng=random.Random(seed))
        picks.add(ai.get_move(board, Difficulty.HARD))

    assert picks == {2, 6, 8}


def test_hard_falls_back_to_edges():
    # Center and corners taken, nobody threatens a line
    board = Board.from_list(["O", "X", "O", _, "X", _, "X", "O", "X"])

    picks = set()
    for seed in range(30):
        ai = AIPlayer(Mark.O, rng=random.Random(seed))
        before = board.tobytes()
        picks.add(ai.get_move(board, Difficulty.HARD))
        assert board.tobytes() == before

    assert picks == {3, 5}


def test_bool_is_not_a_cell():
    game = GameState()
    assert game.check_move(True, Mark.X) == MoveError.OUT_OF_RANGE
    assert game.check_move(False, Mark.X) == MoveError.OUT_OF_RANGE
    assert not game.apply_move(False, Mark.X)
    assert game.board.empty_cells() == list(range(9))


def test_selector_leaves_board_untouched():
    boards = [
        Board(),
        Board.from_list(["X", "X", _, "O", "O", _, _, _, _]),
        Board.from_list(["X", "X", _, "O", _, _, _, _, _]),
        Board.from_list(["X", "O", "X", "O", "X", _, _, _, "O"]),
    ]

    for board in boards:
        for difficulty in Difficulty:
            before = board.tobytes()
            move = choose_move(board, difficulty, Mark.O, Mark.X, rng=random.Random(1))
            assert board.tobytes() == before
            assert board.is_empty(move)


def test_full_board_has_no_move():
    board = Board.from_list(["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    ai = AIPlayer(Mark.O, rng=random.Random(0))

    for difficulty in Difficulty:
        assert ai.get_move(board, difficulty) == NO_MOVE


def test_easy_picks_any_empty_cell():
    board = Board.from_list(["X", _, _, _, "O", _, _, _, "X"])
    ai = AIPlayer(Mark.O, rng=random.Random(11))

    picks = {ai.get_move(board, Difficulty.EASY) for _i in range(200)}
    assert picks == set(board.empty_cells())


def test_medium_flips_one_coin_per_move():
    hard_coin = FixedRandom(0.0)
    ai = AIPlayer(Mark.O, rng=hard_coin)
    assert ai.get_move(Board(), Difficulty.MEDIUM) == 4
    assert hard_coin.random_calls == 1

    easy_coin = FixedRandom(0.99)
    ai = AIPlayer(Mark.O, rng=easy_coin)
    assert ai.get_move(Board(), Difficulty.MEDIUM) == 8
    assert easy_coin.random_calls == 1


def test_unknown_difficulty_plays_random():
    ai = AIPlayer(Mark.O, rng=FixedRandom(0.0))
    assert ai.get_move(Board(), None) == 8
    assert ai.get_move(Board(), "impossible") == 8
    assert ai.get_move(Board(), "HARD") == 4


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    tests = [
        (name, func) for name, func in sorted(globals().items())
        if name.startswith("test_") and callable(func)
    ]

    all_passed = True
    for name, func in tests:
        try:
            func()
            print(f"  {name}: ✓ PASS")
        except Exception as e:
            print(f"  {name}: ✗ FAIL {type(e).__name__}: {e}")
            import traceback
            traceback.print_exc()
            all_passed = False

    print("="*60)
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
