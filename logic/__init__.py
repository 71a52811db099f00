"""
Logic module for TicTacToe.
Handles game state, rules, the computer opponent, and the
round/session controller.
"""

__version__ = "1.0.0"

from .game_state import GameState, Board, Mark, Move, MoveError
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, TurnOutcome, TurnResult
from .ai_player import AIPlayer, Difficulty, NO_MOVE, choose_move
from .session import GameSession, Mode
from .controller import GameController, Phase, Snapshot
