"""
Game configuration for TicTacToe.
Symbols, board dimensions and search scores.
"""


class GameConfig:
    """
    Configuration class for the game rules and the search engine.
    The board is always 3x3 with 3-in-a-row wins.
    """

    # ==================== PLAYER SETTINGS ====================
    # Player one always moves first
    PLAYER_ONE_SYMBOL = "X"
    PLAYER_TWO_SYMBOL = "O"

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8

    # ==================== SEARCH SETTINGS ====================
    # Scores are from player one's point of view
    WIN_SCORE = 1
    DRAW_SCORE = 0
    LOSS_SCORE = -1

    # Alpha-beta bounds are the true evaluation range
    MIN_SCORE = LOSS_SCORE
    MAX_SCORE = WIN_SCORE
