"""
Main orchestration script for TicTacToe.

This script ties together:
- Logic (game state, move validation, win checking, AI)
- Console UI (menu, board display, input)

Run this script to play TicTacToe in the terminal!
"""

import logging
from typing import Optional, Sequence

from logic.game_state import GameState, Mark, InvariantViolation
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, OutcomeKind
from logic.ai_player import AIPlayer
from ui import ConsoleUI

logger = logging.getLogger(__name__)


class TicTacToeGame:
    """
    Main controller for a TicTacToe session.

    Game flow:
    1. Show the board and stop if someone won or the board is full
    2. On a human turn, read a cell and validate it
    3. On the computer's turn, ask the AI for the best cell
    4. Apply the move and repeat
    """

    def __init__(
        self,
        ui: Optional[ConsoleUI] = None,
        computer_player: Mark = Mark.PLAYER_TWO
    ):
        """
        Initialize the game controller.

        Args:
            ui: Console front end.
            computer_player: Which mark the computer plays in
                Human vs Computer games.
        """
        self.ui = ui or ConsoleUI()
        self.computer_player = computer_player

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer()

        self.game_state = GameState.new()

    def run(self):
        """Show the main menu until the player picks Exit."""
        config = self.ui.config

        self.ui.clear()
        self.ui.show(config.WELCOME)

        while True:
            option = self.ui.pick_option()
            if option == config.OPTION_HUMAN_VS_HUMAN:
                self.play(vs_computer=False)
            elif option == config.OPTION_HUMAN_VS_COMPUTER:
                self.play(vs_computer=True)
            elif option == config.OPTION_EXIT:
                break
            else:
                self.ui.show(config.INVALID_OPTION)

        self.ui.show(config.FAREWELL)

    def play(self, vs_computer: bool) -> GameState:
        """
        Play one game to the end.

        Args:
            vs_computer: If True, the computer plays computer_player.

        Returns:
            The final game state.
        """
        self.ui.clear()
        self.game_state = GameState.new()
        logger.debug("New game (vs_computer=%s)", vs_computer)

        while True:
            self.ui.show_board(self.game_state)

            outcome = self.win_checker.get_outcome(self.game_state)
            if outcome.kind == OutcomeKind.DRAW:
                self.ui.show_draw()
                break
            if outcome.kind == OutcomeKind.WON:
                self.ui.show_winner(
                    outcome.winner,
                    self.win_checker.get_winning_line(self.game_state)
                )
                break

            mark = self.game_state.turn_to_move()
            if vs_computer and mark == self.computer_player:
                self._computer_move()
            else:
                self._human_move(mark)

        return self.game_state

    def _human_move(self, mark: Mark):
        """Read and apply one human move, or report why it was rejected."""
        config = self.ui.config
        text = self.ui.ask_move(mark)

        if text == config.HINT_COMMAND:
            hint = self.ai.get_move_suggestion(self.game_state)
            self.ui.clear()
            self.ui.show(hint)
            return

        result = self.validator.validate_move_text(self.game_state, text)
        self.ui.clear()

        if not result.is_valid:
            logger.debug("Rejected move %r: %s", text, result.error_message)
            self.ui.show(config.INVALID_MOVE)
            return

        self.game_state.apply_move(result.move)
        logger.debug("%s played cell %d", mark.symbol, result.move)

    def _computer_move(self):
        """Let the AI choose and apply a move."""
        move = self.ai.best_move(self.game_state)

        # The outcome was checked first, so a move always exists here
        if move is None:
            raise InvariantViolation("AI found no move in a game in progress")

        self.game_state.apply_move(move)
        self.ui.clear()
        self.ui.show(self.ui.config.COMPUTER_MOVE.format(move=move))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe in the terminal")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X) in Human vs Computer games"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Never clear the terminal between turns"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information (moves, AI search statistics)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s: %(message)s"
    )

    computer_player = Mark.PLAYER_ONE if args.computer_first else Mark.PLAYER_TWO
    game = TicTacToeGame(
        ui=ConsoleUI(clear_screen=not args.no_clear),
        computer_player=computer_player
    )

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        game.ui.show("\n\nGame interrupted by user.")
        game.ui.show("Goodbye!")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
