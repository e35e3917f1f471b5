"""
Move validator for TicTacToe.
Turns raw player input into a checked cell index.
"""

from typing import Optional
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    move: Optional[int] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Input must be a whole number
    2. The number must be a cell index (0-8)
    3. The cell must be empty
    4. Game must not be over
    """

    # Longest digit string that can still name a cell
    MAX_MOVE_DIGITS = len(str(GameConfig.CELL_COUNT - 1))

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, game_state: GameState, idx: int) -> ValidationResult:
        """
        Validate a move given as a cell index.

        Args:
            game_state: Current game state.
            idx: Cell to play.

        Returns:
            ValidationResult with is_valid, the move, and error_message.
        """
        outcome = self.win_checker.get_outcome(game_state)
        if outcome.is_over:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over ({outcome})!"
            )

        last = GameConfig.CELL_COUNT - 1
        if not 0 <= idx <= last:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {idx}. Must be 0-{last}."
            )

        if not game_state.is_move_valid(idx):
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {idx} is already taken by {game_state.cell_label(idx)}"
            )

        return ValidationResult(is_valid=True, move=idx)

    def validate_move_text(self, game_state: GameState, text: str) -> ValidationResult:
        """
        Validate a move typed by a player.

        Args:
            game_state: Current game state.
            text: Raw input, surrounding whitespace allowed.

        Returns:
            ValidationResult. On success, move holds the parsed index.
        """
        text = text.strip()
        # Digits only: rejects "+4", "-1" and "4.0" the same way as "abc"
        if not text.isdigit() or not text.isascii():
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text}' is not a cell number."
            )

        # Never hand int() an arbitrarily long string
        digits = text.lstrip("0") or "0"
        if len(digits) > self.MAX_MOVE_DIGITS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell number. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        return self.validate_move(game_state, int(digits))
