"""
Tests for the minimax AI.
"""

from functools import lru_cache

import pytest

from logic.game_state import GameState, Mark, InvariantViolation
from logic.win_checker import WinChecker, OutcomeKind
from logic.ai_player import AIPlayer


@pytest.fixture
def ai():
    return AIPlayer()


@lru_cache(maxsize=None)
def plain_minimax(cells: tuple) -> int:
    """Unpruned minimax over symbol tuples, independent of the engine."""
    for a, b, c in WinChecker.WINNING_LINES:
        if cells[a] is not None and cells[a] == cells[b] == cells[c]:
            return 1 if cells[a] == "X" else -1

    empty = [i for i, cell in enumerate(cells) if cell is None]
    if not empty:
        return 0

    mark = "X" if cells.count("X") <= cells.count("O") else "O"
    scores = [
        plain_minimax(cells[:i] + (mark,) + cells[i + 1:])
        for i in empty
    ]
    return max(scores) if mark == "X" else min(scores)


def symbols(game: GameState) -> tuple:
    return tuple(None if cell is None else cell.symbol for cell in game.cells)


def test_evaluate_terminal_boards(ai):
    x_wins = GameState.from_cells(["X", "X", "X", "O", "O", None, None, None, None])
    o_wins = GameState.from_cells(["X", "X", "O", "X", "O", None, "O", None, None])
    draw = GameState.from_cells(["X", "O", "X", "X", "O", "O", "O", "X", "X"])

    assert ai.evaluate(x_wins) == 1
    assert ai.evaluate(o_wins) == -1
    assert ai.evaluate(draw) == 0


def test_evaluate_in_progress_is_a_contract_violation(ai):
    with pytest.raises(InvariantViolation):
        ai.evaluate(GameState.new())


def test_empty_board_is_a_forced_draw(ai):
    game = GameState.new()

    assert ai.minimax(game) == 0
    assert ai.score_moves(game) == [(idx, 0) for idx in range(9)]
    assert ai.best_move(game) == 0
    assert game == GameState.new()


def test_takes_the_win(ai):
    game = GameState.from_cells(["X", "X", None, "O", "O", None, None, None, None])

    assert game.turn_to_move() == Mark.PLAYER_ONE
    assert ai.minimax(game) == 1
    assert ai.best_move(game) == 2


def test_player_two_takes_the_win(ai):
    game = GameState.from_cells(["X", "X", None, "O", "O", None, "X", None, None])

    assert game.turn_to_move() == Mark.PLAYER_TWO
    assert ai.minimax(game) == -1
    assert ai.best_move(game) == 5


def test_blocks_the_opponent(ai):
    game = GameState.from_cells(["X", "X", None, None, "O", None, None, None, None])

    assert ai.best_move(game) == 2


def test_answers_corner_opening_with_center(ai):
    game = GameState.new()
    game.apply_move(0)

    assert ai.best_move(game) == 4


def test_no_move_on_a_full_board(ai):
    game = GameState.from_cells(["X", "O", "X", "X", "O", "O", "O", "X", "X"])

    assert ai.best_move(game) is None
    assert ai.get_move_suggestion(game) == "No moves available!"


def test_search_leaves_board_untouched(ai):
    game = GameState.new()
    for idx in (4, 0, 8):
        game.apply_move(idx)
    before = game.copy()

    ai.best_move(game)

    assert game == before


def test_alpha_beta_matches_plain_minimax(ai, reachable_states):
    for state in reachable_states:
        expected = plain_minimax(symbols(state))
        if ai.win_checker.get_outcome(state).is_over:
            assert ai.evaluate(state) == expected
        else:
            assert ai.minimax(state) == expected


def test_pruning_visits_fewer_positions(ai):
    ai.minimax(GameState.new())

    # Unpruned minimax visits 549946 positions from the empty board
    assert 0 < ai.positions_evaluated < 549946


def test_best_move_scores_are_exact(ai, reachable_states):
    for state in reachable_states[::25]:
        if ai.win_checker.get_outcome(state).is_over:
            continue
        for move, score in ai.score_moves(state):
            child = state.copy()
            child.apply_move(move)
            assert score == plain_minimax(symbols(child))


def test_self_play_is_a_draw(ai):
    game = GameState.new()
    while not ai.win_checker.get_outcome(game).is_over:
        game.apply_move(ai.best_move(game))

    assert ai.win_checker.get_outcome(game).kind == OutcomeKind.DRAW


def test_move_suggestion(ai):
    game = GameState.from_cells(["X", "X", None, "O", "O", None, None, None, None])

    assert ai.get_move_suggestion(game) == "Place X on cell 2"
