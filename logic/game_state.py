"""
Game state management for TicTacToe.
Tracks the board, the side to move, and the move stack used for backtracking.
"""

from enum import Enum
from typing import Optional, List, Sequence, Union
from dataclasses import dataclass, field

from .config import GameConfig


class IllegalMoveError(ValueError):
    """Raised when a move is applied to an occupied or out-of-range cell."""


class InvariantViolation(RuntimeError):
    """
    Raised when the board or the search reaches a state that correct code
    can never produce. Never caught outside of tests.
    """


class Mark(Enum):
    """The two marks a cell can hold."""
    PLAYER_ONE = GameConfig.PLAYER_ONE_SYMBOL
    PLAYER_TWO = GameConfig.PLAYER_TWO_SYMBOL

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.PLAYER_TWO if self == Mark.PLAYER_ONE else Mark.PLAYER_ONE

    @property
    def symbol(self) -> str:
        return self.value


Cell = Optional[Mark]


@dataclass
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 9 cells (None means empty, otherwise the Mark placed there)
    - The side to move, stored explicitly
    - The stack of applied moves, so retract_move can check its argument
    """

    # Cells 0-8, row by row
    cells: List[Cell] = field(
        default_factory=lambda: [None] * GameConfig.CELL_COUNT
    )

    # Player one always starts
    current_player: Mark = Mark.PLAYER_ONE

    # Applied move indices, oldest first
    moves: List[int] = field(default_factory=list)

    @classmethod
    def new(cls) -> "GameState":
        """Create a fresh board with every cell empty."""
        return cls()

    @classmethod
    def from_cells(cls, cells: Sequence[Union[Cell, str]]) -> "GameState":
        """
        Build a position directly from cell contents.

        Args:
            cells: 9 entries. Each is a Mark, None, a player symbol ("X"/"O"),
                or the empty cell's own digit label ("0"-"8").

        Returns:
            A GameState whose side to move is derived from the mark counts.

        Raises:
            ValueError: If there are not 9 cells, a cell is not recognised,
                or the mark counts are not possible in a real game.
        """
        if len(cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"Expected {GameConfig.CELL_COUNT} cells, got {len(cells)}"
            )

        parsed = [_parse_cell(idx, cell) for idx, cell in enumerate(cells)]
        ones = parsed.count(Mark.PLAYER_ONE)
        twos = parsed.count(Mark.PLAYER_TWO)
        if ones - twos not in (0, 1):
            raise ValueError(
                f"Impossible mark counts: {ones} x {Mark.PLAYER_ONE.symbol}, "
                f"{twos} x {Mark.PLAYER_TWO.symbol}"
            )

        current = Mark.PLAYER_ONE if ones <= twos else Mark.PLAYER_TWO
        # Move order is unknown for a constructed board, so the stack stays
        # empty and only the moves applied from here on can be retracted.
        return cls(cells=parsed, current_player=current)

    @property
    def move_count(self) -> int:
        """Number of marks on the board."""
        return sum(1 for cell in self.cells if cell is not None)

    def count(self, mark: Mark) -> int:
        return self.cells.count(mark)

    def turn_to_move(self) -> Mark:
        """Get the mark that moves next."""
        assert self.current_player == self._derived_turn(), (
            f"Stored turn {self.current_player} disagrees with mark counts"
        )
        return self.current_player

    def _derived_turn(self) -> Mark:
        if self.count(Mark.PLAYER_ONE) <= self.count(Mark.PLAYER_TWO):
            return Mark.PLAYER_ONE
        return Mark.PLAYER_TWO

    def is_move_valid(self, idx: int) -> bool:
        """
        Check whether a cell can be played.

        Args:
            idx: Cell index (0-8).

        Returns:
            False if idx is out of range or the cell is already marked.
        """
        if not isinstance(idx, int) or isinstance(idx, bool):
            return False
        if not 0 <= idx < GameConfig.CELL_COUNT:
            return False
        return self.cells[idx] is None

    def apply_move(self, idx: int):
        """
        Place the current player's mark on a cell and pass the turn.

        Args:
            idx: Cell index (0-8). Must be valid.

        Raises:
            IllegalMoveError: If the cell is out of range or occupied.
        """
        if not self.is_move_valid(idx):
            raise IllegalMoveError(f"Cannot play cell {idx!r}")

        mark = self.turn_to_move()
        self.cells[idx] = mark
        self.moves.append(idx)
        self.current_player = mark.opposite()

    def retract_move(self, idx: int):
        """
        Undo the most recent move, restoring the exact prior state.

        Args:
            idx: The cell of the most recent apply_move.

        Raises:
            InvariantViolation: If idx is not the most recent move.
        """
        if not self.moves or self.moves[-1] != idx:
            raise InvariantViolation(
                f"Cell {idx} is not the last move played (stack: {self.moves})"
            )

        self.moves.pop()
        self.cells[idx] = None
        self.current_player = self.current_player.opposite()

    def legal_moves(self) -> List[int]:
        """
        Get all empty cells.

        Returns:
            Cell indices in ascending order.
        """
        return [idx for idx, cell in enumerate(self.cells) if cell is None]

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            cells=list(self.cells),
            current_player=self.current_player,
            moves=list(self.moves),
        )

    def cell_label(self, idx: int) -> str:
        """The symbol in a cell, or its own index digit when empty."""
        cell = self.cells[idx]
        return str(idx) if cell is None else cell.symbol

    def render(self, separator: str = "---------") -> str:
        """
        Render the board as a 3x3 grid.

        Args:
            separator: Line printed between rows.

        Returns:
            Multi-line string, e.g. "0 | 1 | 2" rows split by separators.
        """
        size = GameConfig.BOARD_SIZE
        rows = []
        for row in range(size):
            labels = [self.cell_label(row * size + col) for col in range(size)]
            rows.append(" | ".join(labels))
        return f"\n{separator}\n".join(rows)


def _parse_cell(idx: int, cell: Union[Cell, str]) -> Cell:
    if cell is None or isinstance(cell, Mark):
        return cell
    for mark in Mark:
        if cell == mark.symbol:
            return mark
    # An empty cell may only carry its own index
    if cell == str(idx):
        return None
    raise ValueError(f"Unrecognised value {cell!r} in cell {idx}")
