"""
Session data for TicTacToe.
One GameSession lives for the whole app run: the current round plus
mode, difficulty and the score across rounds.
"""

from enum import Enum
from typing import Optional, Dict
from dataclasses import dataclass, field

from .ai_player import Difficulty
from .config import GameConfig
from .game_state import GameState, Mark


class Mode(Enum):
    """Who is playing."""
    PLAYER_VS_PLAYER = "pvp"
    PLAYER_VS_COMPUTER = "pvc"

    @classmethod
    def parse(cls, value) -> Optional["Mode"]:
        """Get a Mode from an enum or its value ("pvp"/"pvc"), or None."""
        if isinstance(value, Mode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


def _new_scores() -> Dict[Mark, int]:
    return {Mark.X: 0, Mark.O: 0}


@dataclass
class GameSession:
    """
    Everything that survives between rounds.

    Scores are only cleared by reset_score(); restart() keeps them
    along with the mode and difficulty.
    """

    # No moves are accepted until a mode is picked
    game: GameState = field(default_factory=lambda: GameState(active=False))

    mode: Optional[Mode] = None
    difficulty: Optional[Difficulty] = None

    scores: Dict[Mark, int] = field(default_factory=_new_scores)
    draws: int = 0

    # Computer takes X and opens
    computer_first: bool = False

    config: GameConfig = field(default_factory=GameConfig)

    @property
    def active(self) -> bool:
        return self.game.active

    @property
    def is_vs_computer(self) -> bool:
        return self.mode == Mode.PLAYER_VS_COMPUTER

    @property
    def human_mark(self) -> Mark:
        return self.config.marks(self.computer_first)[0]

    @property
    def computer_mark(self) -> Mark:
        return self.config.marks(self.computer_first)[1]

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.is_vs_computer
            and self.game.active
            and self.game.current_player == self.computer_mark
        )

    def restart(self):
        """New round; mode, difficulty and scores are kept."""
        self.game.reset()

    def change_mode(self):
        """Forget the mode and difficulty, then restart."""
        self.mode = None
        self.difficulty = None
        self.restart()

    def reset_score(self):
        """Zero the scores, then restart."""
        self.scores = _new_scores()
        self.draws = 0
        self.restart()

    def end_round(self):
        """Count the result of a finished round."""
        if self.game.winner is not None:
            self.scores[self.game.winner] += 1
        elif self.game.is_draw:
            self.draws += 1
