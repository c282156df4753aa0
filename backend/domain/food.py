"""
Food entity - the single cell the snake is chasing.
"""

import random
from typing import Tuple, Optional


class Food:
    """
    Holds the food coordinate.

    Relocation is uniform over every board cell and does not avoid the
    snake body, so food may land under the snake.
    """

    def __init__(self, position: Tuple[int, int] = (0, 0)):
        self.position = position

    def relocate(
        self,
        board_width: int,
        board_height: int,
        cell_size: int,
        rng: Optional[random.Random] = None
    ) -> Tuple[int, int]:
        rng = rng or random
        x = rng.randrange(board_width // cell_size) * cell_size
        y = rng.randrange(board_height // cell_size) * cell_size
        self.position = (x, y)
        return self.position

    def __repr__(self):
        return f"<Food at {self.position}>"
