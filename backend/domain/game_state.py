"""
GameState entity - a snapshot of the game at a point in time.
"""

from enum import Enum
from typing import List, Tuple, Optional


class GameStatus(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have been applied since the game started
        snake_positions: list of (x, y), head first
        food: (x, y) of the food cell
        direction: direction applied on the last advance
        score: food eaten this game
        high_score: best score known when this snapshot was taken
        status: GameStatus.RUNNING or GameStatus.GAME_OVER
        width, height: board dimensions in logical units
        cell_size: size of one grid cell in logical units
        death_reason: 'self' or 'wall' once the game is over
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        food: Tuple[int, int],
        direction: str,
        score: int,
        high_score: int,
        status: GameStatus,
        width: int,
        height: int,
        cell_size: int,
        death_reason: Optional[str] = None
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.food = food
        self.direction = direction
        self.score = score
        self.high_score = high_score
        self.status = status
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.death_reason = death_reason

    @property
    def is_running(self) -> bool:
        return self.status is GameStatus.RUNNING

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def copy(self, **changes) -> "GameState":
        """Return an independent snapshot, optionally with some fields replaced."""
        fields = {
            "tick_number": self.tick_number,
            "snake_positions": list(self.snake_positions),
            "food": self.food,
            "direction": self.direction,
            "score": self.score,
            "high_score": self.high_score,
            "status": self.status,
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
            "death_reason": self.death_reason,
        }
        fields.update(changes)
        return GameState(**fields)

    def print_board(self) -> str:
        """
        Returns a string representation of the board in grid cells with:
        . = empty space
        F = food
        H = snake head
        T = snake body
        Row 0 is the top of the board. Cells outside the board are skipped.
        """
        cols = self.width // self.cell_size
        rows = self.height // self.cell_size
        board = [['.' for _ in range(cols)] for _ in range(rows)]

        fx, fy = self.food[0] // self.cell_size, self.food[1] // self.cell_size
        if 0 <= fx < cols and 0 <= fy < rows:
            board[fy][fx] = 'F'

        # Draw the body tail-first so the head wins on overlap
        for idx in range(len(self.snake_positions) - 1, -1, -1):
            x, y = self.snake_positions[idx]
            cx, cy = x // self.cell_size, y // self.cell_size
            if 0 <= cx < cols and 0 <= cy < rows:
                board[cy][cx] = 'H' if idx == 0 else 'T'

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, status={self.status.value}, "
            f"head={self.snake_positions[0] if self.snake_positions else None}, "
            f"length={len(self.snake_positions)}, food={self.food}, score={self.score}>"
        )
