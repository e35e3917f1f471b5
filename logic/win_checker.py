"""
Win checker for TicTacToe.
Derives the outcome of a board: still in progress, drawn, or won.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .game_state import GameState, Mark, InvariantViolation


class OutcomeKind(Enum):
    """Tags of the Outcome variant."""
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    WON = "won"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a board: InProgress, Draw or Won(winner).
    Always recomputed from the cells, never stored on the board.
    """
    kind: OutcomeKind
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeKind.DRAW)

    @classmethod
    def won(cls, winner: Mark) -> "Outcome":
        return cls(OutcomeKind.WON, winner)

    @property
    def is_over(self) -> bool:
        """True for Draw and Won."""
        return self.kind != OutcomeKind.IN_PROGRESS

    def __str__(self) -> str:
        if self.kind == OutcomeKind.WON:
            return f"Won({self.winner.symbol})"
        return "Draw" if self.kind == OutcomeKind.DRAW else "InProgress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, as cell indices
    WINNING_LINES: List[Tuple[int, int, int]] = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Mark, or None if no winner yet.

        Raises:
            InvariantViolation: If both players own a winning line.
        """
        winners = set()
        for line in self.WINNING_LINES:
            owner = self._check_line(game_state.cells, line)
            if owner is not None:
                winners.add(owner)

        if len(winners) > 1:
            raise InvariantViolation(
                f"Both players have a winning line:\n{game_state.render()}"
            )

        return winners.pop() if winners else None

    def _check_line(
        self,
        cells: List[Optional[Mark]],
        line: Tuple[int, int, int]
    ) -> Optional[Mark]:
        """
        Check if a single line is owned by one player.

        Args:
            cells: The board cells.
            line: Three cell indices.

        Returns:
            The owning Mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return cells[a]
        return None

    def get_outcome(self, game_state: GameState) -> Outcome:
        """
        Compute the outcome of a board.

        Args:
            game_state: The game state.

        Returns:
            Won(winner) if a line is complete, otherwise InProgress while any
            cell is empty, otherwise Draw.
        """
        winner = self.check_winner(game_state)
        if winner is not None:
            return Outcome.won(winner)
        if any(cell is None for cell in game_state.cells):
            return Outcome.in_progress()
        return Outcome.draw()

    def get_winning_line(self, game_state: GameState) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            game_state: The game state.

        Returns:
            The first complete line as cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(game_state.cells, line) is not None:
                return line
        return None
