"""
Game constants for the desktop Snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: y grows downward
DIRECTION_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Board settings (logical units)
BOARD_WIDTH = 500
BOARD_HEIGHT = 400
CELL_SIZE = 10
ALL_CELLS = (BOARD_WIDTH * BOARD_HEIGHT) // (CELL_SIZE * CELL_SIZE)

# Snake start
INITIAL_LENGTH = 3
INITIAL_HEAD = (50, 50)
INITIAL_DIRECTION = RIGHT

# Game loop
TICK_MS = 100

# Persistence
DEFAULT_HIGH_SCORE_FILE = "highest_score.txt"

# Keys
RESTART_KEY = "R"
