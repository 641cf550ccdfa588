"""
Game configuration for TicTacToe.
All the settings for the board, the marks, the automated players and logging.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values based on your setup!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8

    # What an unplayed cell holds
    EMPTY = " "

    # All possible winning lines (as cell index triples)
    WINNING_LINES = (
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
    )

    # ==================== PLAYER SETTINGS ====================
    # First seat, second seat
    DEFAULT_MARKS = ("X", "O")

    # Priority tiers for the weighted strategy: center -> corners -> edges
    CENTER = 4
    CORNERS = (0, 2, 6, 8)
    EDGES = (1, 3, 5, 7)

    # Seed for the random strategies (None = different game every run)
    RANDOM_SEED = None

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = "WARNING"
    LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
