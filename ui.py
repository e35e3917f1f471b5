"""
TicTacToe console UI.
Line-based terminal front end for the game.

Shows:
- The board as a 3x3 grid of cell labels
- The main menu (Human vs Human / Human vs Computer / Exit)
- Turn prompts, results and error messages
"""

import os
import sys
from typing import Callable, Optional, Tuple

from logic.game_state import GameState, Mark


class ConsoleConfig:
    """
    Configuration for the console front end.
    All user-facing text lives here.
    """

    # ==================== SCREEN SETTINGS ====================
    # ANSI: erase display, cursor to row 1 column 1
    CLEAR_SEQUENCE = "\x1b[2J\x1b[1;1H"
    WINDOWS_CLEAR_COMMAND = "cls"
    ROW_SEPARATOR = "---------"

    # ==================== MENU ====================
    WELCOME = "Welcome to the Simple TicTacToe game"
    MENU = "1. Human vs Human\n2. Human vs Computer\n3. Exit"
    MENU_PROMPT = "Pick an option (1, 2, 3): "
    OPTION_HUMAN_VS_HUMAN = "1"
    OPTION_HUMAN_VS_COMPUTER = "2"
    OPTION_EXIT = "3"
    INVALID_OPTION = "Invalid option, please pick a valid option."
    FAREWELL = "Thanks for playing, cya"

    # ==================== GAME ====================
    TURN_PROMPT = "\n{symbol}'s turn: "
    HINT_COMMAND = "?"
    INVALID_MOVE = "Invalid number!"
    DRAW = "Draw!"
    WINNER = "Player {symbol} has won!"
    WINNING_LINE = "Winning line: {cells}"
    COMPUTER_MOVE = "Computer played cell {move}"


class ConsoleUI:
    """
    Terminal I/O for the game.

    Input and output functions are injectable so the game can be driven
    by a script instead of a real terminal.
    """

    def __init__(
        self,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[..., None]] = None,
        clear_screen: bool = True,
        config: Optional[ConsoleConfig] = None
    ):
        """
        Initialize the console UI.

        Args:
            input_fn: Reads one line after showing a prompt (default: input).
            output_fn: Prints a message (default: print).
            clear_screen: If False, clear() does nothing.
            config: Text and screen settings.
        """
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.clear_screen = clear_screen
        self.config = config or ConsoleConfig()

    def clear(self):
        """Clear the terminal."""
        if not self.clear_screen:
            return

        if os.name == "nt":
            os.system(self.config.WINDOWS_CLEAR_COMMAND)
        else:
            sys.stdout.write(self.config.CLEAR_SEQUENCE)
            sys.stdout.flush()

    def show(self, message: str = ""):
        self.output_fn(message)

    def show_board(self, game_state: GameState):
        """Print the board with row separators."""
        self.show(game_state.render(self.config.ROW_SEPARATOR))

    def read_line(self, prompt: str) -> str:
        """Show a prompt and return the trimmed answer."""
        return self.input_fn(prompt).strip()

    def pick_option(self) -> str:
        """Show the main menu and return the raw choice."""
        self.show(self.config.MENU)
        return self.read_line(self.config.MENU_PROMPT)

    def ask_move(self, mark: Mark) -> str:
        """Ask a human player for a cell."""
        return self.read_line(self.config.TURN_PROMPT.format(symbol=mark.symbol))

    def show_winner(self, mark: Mark, line: Optional[Tuple[int, int, int]] = None):
        """Announce the winner and, when known, the completed line."""
        self.show(self.config.WINNER.format(symbol=mark.symbol))
        if line is not None:
            cells = " - ".join(str(idx) for idx in line)
            self.show(self.config.WINNING_LINE.format(cells=cells))

    def show_draw(self):
        self.show(self.config.DRAW)
