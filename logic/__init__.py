"""
Logic module for TicTacToe.
Handles game state, rules, and the AI opponent.
"""

from .config import GameConfig
from .game_state import GameState, Mark, IllegalMoveError, InvariantViolation
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, Outcome, OutcomeKind
from .ai_player import AIPlayer

__version__ = "1.0.0"
