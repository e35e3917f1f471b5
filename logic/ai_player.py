"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
from typing import Optional, List, Tuple

from .config import GameConfig
from .game_state import GameState, Mark, InvariantViolation
from .win_checker import WinChecker, OutcomeKind

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    Scores are always from player one's point of view: player one
    maximizes, player two minimizes. The search is exhaustive, so the AI
    wins when it can, blocks when it must, and never loses.

    The board is searched in place: every move is applied, searched, and
    retracted before the next sibling is tried.
    """

    def __init__(self):
        self.win_checker = WinChecker()

        # Number of positions visited by the last search
        self.positions_evaluated = 0

    def evaluate(self, game_state: GameState) -> int:
        """
        Score a finished game.

        Args:
            game_state: A terminal game state.

        Returns:
            +1 if player one won, -1 if player two won, 0 for a draw.

        Raises:
            InvariantViolation: If the game is still in progress.
        """
        outcome = self.win_checker.get_outcome(game_state)

        if outcome.kind == OutcomeKind.DRAW:
            return GameConfig.DRAW_SCORE
        if outcome.kind == OutcomeKind.WON:
            if outcome.winner == Mark.PLAYER_ONE:
                return GameConfig.WIN_SCORE
            return GameConfig.LOSS_SCORE

        raise InvariantViolation(
            f"evaluate() called on a game in progress:\n{game_state.render()}"
        )

    def minimax(
        self,
        game_state: GameState,
        alpha: int = GameConfig.MIN_SCORE,
        beta: int = GameConfig.MAX_SCORE
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            game_state: Position to search. Restored before returning.
            alpha: Best score player one is already guaranteed.
            beta: Best score player two is already guaranteed.

        Returns:
            The minimax value of the position: +1, 0 or -1.
        """
        self.positions_evaluated += 1

        if self.win_checker.get_outcome(game_state).is_over:
            return self.evaluate(game_state)

        maximizing = game_state.turn_to_move() == Mark.PLAYER_ONE

        if maximizing:
            max_score = GameConfig.MIN_SCORE
            for idx in game_state.legal_moves():
                game_state.apply_move(idx)
                score = self.minimax(game_state, alpha, beta)
                game_state.retract_move(idx)

                max_score = max(max_score, score)
                alpha = max(alpha, max_score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = GameConfig.MAX_SCORE
            for idx in game_state.legal_moves():
                game_state.apply_move(idx)
                score = self.minimax(game_state, alpha, beta)
                game_state.retract_move(idx)

                min_score = min(min_score, score)
                beta = min(beta, min_score)
                if beta <= alpha:
                    break  # Prune
            return min_score

    def score_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Score every legal move with a full-window search.

        Args:
            game_state: Current game state.

        Returns:
            (move, score) pairs in ascending move order.
        """
        self.positions_evaluated = 0

        scored = []
        for idx in game_state.legal_moves():
            game_state.apply_move(idx)
            scored.append((idx, self.minimax(game_state)))
            game_state.retract_move(idx)

        return scored

    def best_move(self, game_state: GameState) -> Optional[int]:
        """
        Get the optimal move for the side to move.

        Ties go to the lowest cell index.

        Args:
            game_state: Current game state, normally in progress.

        Returns:
            Cell index of the best move, or None if no cell is empty.
        """
        scored = self.score_moves(game_state)

        if not scored:
            return None

        # max()/min() keep the first of equal scores
        if game_state.turn_to_move() == Mark.PLAYER_ONE:
            move, score = max(scored, key=lambda pair: pair[1])
        else:
            move, score = min(scored, key=lambda pair: pair[1])

        logger.debug(
            "AI evaluated %d positions. Best move: %d (score: %d)",
            self.positions_evaluated, move, score
        )

        return move

    def get_move_suggestion(self, game_state: GameState) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            game_state: Current game state.

        Returns:
            A string describing the suggested move.
        """
        if self.win_checker.get_outcome(game_state).is_over:
            return "No moves available!"

        move = self.best_move(game_state)
        if move is None:
            return "No moves available!"

        mark = game_state.turn_to_move()
        return f"Place {mark.symbol} on cell {move}"
