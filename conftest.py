"""
Shared fixtures for the TicTacToe tests.
"""

from typing import Dict, List, Tuple

import pytest

from logic.game_state import GameState
from logic.win_checker import WinChecker
from ui import ConsoleUI


def _collect_reachable(state: GameState, checker: WinChecker, seen: Dict[Tuple, GameState]):
    key = tuple(state.cells)
    if key in seen:
        return
    seen[key] = state.copy()

    if checker.get_outcome(state).is_over:
        return

    for idx in state.legal_moves():
        state.apply_move(idx)
        _collect_reachable(state, checker, seen)
        state.retract_move(idx)


@pytest.fixture(scope="session")
def reachable_states() -> List[GameState]:
    """Every position reachable from the empty board by legal play (5478)."""
    seen: Dict[Tuple, GameState] = {}
    _collect_reachable(GameState.new(), WinChecker(), seen)
    return list(seen.values())


class ScriptedConsole:
    """
    Fake terminal: answers prompts from a list of lines and records
    everything printed. Raises EOFError when the script runs out.
    """

    def __init__(self, lines: List[str]):
        self.lines = list(lines)
        self.prompts: List[str] = []
        self.output: List[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)

    def print(self, message: str = ""):
        self.output.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.output)

    def make_ui(self) -> ConsoleUI:
        return ConsoleUI(input_fn=self.input, output_fn=self.print, clear_screen=False)


@pytest.fixture
def scripted_console():
    """Factory for ScriptedConsole instances."""
    return ScriptedConsole
