"""
Round/session controller for TicTacToe.

The UI talks to the game only through GameController. Every entry
point runs to completion and returns a Snapshot the UI can render.
Bad input (busy cell, wrong screen, unknown mode) is ignored and
reported back with accepted=False.
"""

import random
from enum import Enum
from typing import Optional, Dict, Tuple, Any
from dataclasses import dataclass, asdict

from .ai_player import AIPlayer, Difficulty, NO_MOVE
from .config import GameConfig
from .session import GameSession, Mode
from .win_checker import WinChecker, TurnOutcome, TurnResult


class Phase(Enum):
    """Which screen the game is on."""
    MODE_SELECT = "mode_select"
    DIFFICULTY_SELECT = "difficulty_select"
    PLAYING = "playing"
    ROUND_OVER = "round_over"


@dataclass(frozen=True)
class Snapshot:
    """Everything the UI needs to draw one frame."""
    phase: Phase
    board: Tuple[str, ...]
    current_player: str
    active: bool
    winner: Optional[str]
    is_draw: bool
    winning_line: Optional[Tuple[int, int, int]]
    mode: Optional[str]
    difficulty: Optional[str]
    scores: Dict[str, int]
    draws: int
    status: str
    computer_pending: bool
    last_move: Optional[int]
    accepted: bool = True
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict (JSON-friendly)."""
        data = asdict(self)
        data["phase"] = self.phase.value
        data["board"] = list(self.board)
        data["winning_line"] = list(self.winning_line) if self.winning_line else None
        return data


class GameController:
    """
    Drives the game through its screens:

        MODE_SELECT --pvp--> PLAYING
        MODE_SELECT --pvc--> DIFFICULTY_SELECT --difficulty--> PLAYING
        PLAYING --win/draw--> ROUND_OVER --restart--> PLAYING
        any --change mode--> MODE_SELECT

    In a computer game the reply is played right after the human move
    when autoplay is on. With autoplay off, the snapshot reports
    computer_pending and the UI calls on_computer_move() when ready.
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        ai: Optional[AIPlayer] = None,
        rng: Optional[random.Random] = None,
        autoplay: bool = True,
        verbose: bool = True,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the controller.

        Args:
            session: Session to drive (default: a new one).
            ai: Computer opponent (default: AIPlayer using rng).
            rng: Random source for the default AIPlayer.
            autoplay: Play the computer's reply inside on_human_move.
            verbose: Print game events to the console.
            config: Game settings.
        """
        self.config = config or (session.config if session else GameConfig())
        self.session = session or GameSession(config=self.config)
        self.ai = ai or AIPlayer(self.session.computer_mark, rng=rng, config=self.config, verbose=verbose)
        self.win_checker = WinChecker()
        self.autoplay = autoplay
        self.verbose = verbose
        self.phase = Phase.MODE_SELECT

    # ==================== ENTRY POINTS ====================

    def on_human_move(self, index: int) -> Snapshot:
        """A human clicked/typed cell `index`."""
        if self.phase != Phase.PLAYING:
            self._log(f"Ignoring move {index}: not playing ({self.phase.value})")
            return self.snapshot(accepted=False)

        if self.session.is_computer_turn:
            self._log(f"Ignoring move {index}: waiting for the computer")
            return self.snapshot(accepted=False)

        result = self._play(index)
        if not result.accepted:
            return self.snapshot(accepted=False, error=result.validation.error.value)

        if self.autoplay and self.session.is_computer_turn:
            self._computer_move()

        return self.snapshot()

    def on_computer_move(self) -> Snapshot:
        """Play the computer's pending move (autoplay off)."""
        if self.phase != Phase.PLAYING or not self.session.is_computer_turn:
            return self.snapshot(accepted=False)

        result = self._computer_move()
        return self.snapshot(accepted=result is not None and result.accepted)

    def on_mode_selected(self, mode) -> Snapshot:
        """Pick PvP (starts play) or PvC (asks for difficulty)."""
        parsed = Mode.parse(mode)
        if parsed is None or self.phase != Phase.MODE_SELECT:
            self._log(f"Ignoring mode {mode!r} on {self.phase.value}")
            return self.snapshot(accepted=False)

        self.session.mode = parsed
        self.session.difficulty = None

        if parsed == Mode.PLAYER_VS_COMPUTER:
            self.phase = Phase.DIFFICULTY_SELECT
            self._log("Mode: player vs computer")
        else:
            self._log("Mode: player vs player")
            self._start_round()

        return self.snapshot()

    def on_difficulty_selected(self, difficulty) -> Snapshot:
        """Pick the computer's difficulty and start play."""
        parsed = Difficulty.parse(difficulty)
        if parsed is None or self.phase != Phase.DIFFICULTY_SELECT:
            self._log(f"Ignoring difficulty {difficulty!r} on {self.phase.value}")
            return self.snapshot(accepted=False)

        self.session.difficulty = parsed
        self._log(f"Difficulty set to: {parsed.value}")
        self._start_round()
        return self.snapshot()

    def on_restart(self) -> Snapshot:
        """New round with the same mode, difficulty and scores."""
        self._log("Restarting round...")
        self.session.restart()
        self._resume()
        return self.snapshot()

    def on_change_mode(self) -> Snapshot:
        """Back to mode select; mode and difficulty are cleared."""
        self._log("Changing mode...")
        self.session.change_mode()
        self.phase = Phase.MODE_SELECT
        return self.snapshot()

    def on_reset_score(self) -> Snapshot:
        """Zero the scores and restart the round."""
        self._log("Resetting score...")
        self.session.reset_score()
        self._resume()
        return self.snapshot()

    # ==================== INTERNALS ====================

    def _start_round(self):
        self.session.restart()
        self.phase = Phase.PLAYING
        self._open_for_computer()

    def _resume(self):
        """After a board reset: back to play if a round was on screen."""
        if self.phase in (Phase.PLAYING, Phase.ROUND_OVER):
            self.phase = Phase.PLAYING
            self._open_for_computer()

    def _open_for_computer(self):
        # Computer plays X: it opens the round
        if self.autoplay and self.session.is_computer_turn:
            self._computer_move()

    def _play(self, index: int) -> TurnResult:
        game = self.session.game
        result = self.win_checker.play_turn(game, index)

        if not result.accepted:
            self._log(f"Move refused: {result.validation.error_message}")
            return result

        self._log(f"{result.mark.value} -> cell {result.index}")

        if result.outcome in (TurnOutcome.WIN, TurnOutcome.DRAW):
            self.session.end_round()
            self.phase = Phase.ROUND_OVER
            self._log(self._round_result_text())

        return result

    def _computer_move(self) -> Optional[TurnResult]:
        session = self.session
        self.ai.player = session.computer_mark

        move = self.ai.get_move(session.game.board, session.difficulty, session.human_mark)
        if move == NO_MOVE:
            self._log("Computer has no move")
            return None

        return self._play(move)

    def _log(self, message: str):
        if self.verbose:
            print(message)

    # ==================== SNAPSHOTS ====================

    def snapshot(self, accepted: bool = True, error: Optional[str] = None) -> Snapshot:
        """Current state for rendering."""
        session = self.session
        game = session.game
        last = game.last_move

        return Snapshot(
            phase=self.phase,
            board=tuple(game.board.to_list()),
            current_player=game.current_player.value,
            active=game.active,
            winner=game.winner.value if game.winner else None,
            is_draw=game.is_draw,
            winning_line=game.winning_line,
            mode=session.mode.value if session.mode else None,
            difficulty=session.difficulty.value if session.difficulty else None,
            scores={mark.value: count for mark, count in session.scores.items()},
            draws=session.draws,
            status=self.status_text(),
            computer_pending=self.phase == Phase.PLAYING and session.is_computer_turn,
            last_move=last.index if last else None,
            accepted=accepted,
            error=error,
        )

    def status_text(self) -> str:
        """The status line shown above the board."""
        session = self.session

        if self.phase == Phase.MODE_SELECT:
            return "Choose game mode"
        if self.phase == Phase.DIFFICULTY_SELECT:
            return "Select difficulty"
        if self.phase == Phase.ROUND_OVER:
            return self._round_result_text()

        if session.is_vs_computer:
            label = session.difficulty.value if session.difficulty else self.config.DEFAULT_DIFFICULTY
            turn = "Computer's turn" if session.is_computer_turn else "Your turn"
            return f"Player vs Computer ({label}) - {turn}"

        return f"Player {session.game.current_player.value}'s turn"

    def _round_result_text(self) -> str:
        game = self.session.game
        if game.winner is None:
            return "It's a draw!"
        if self.session.is_vs_computer:
            return "You win!" if game.winner == self.session.human_mark else "Computer wins!"
        return f"Player {game.winner.value} wins!"
