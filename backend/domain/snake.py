"""
Snake entity for the game engine.
"""

from typing import List, Tuple, Optional

from .constants import (
    ALL_CELLS,
    CELL_SIZE,
    DIRECTION_DELTAS,
    INITIAL_HEAD,
    INITIAL_LENGTH,
)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: list of (x, y) from head at index 0 to tail at the end
        capacity: maximum number of segments (the board cell count)
        cell_size: grid unit every coordinate is a multiple of
    """

    def __init__(
        self,
        positions: List[Tuple[int, int]],
        cell_size: int = CELL_SIZE,
        capacity: Optional[int] = None
    ):
        self.positions = list(positions)
        self.cell_size = cell_size
        self.capacity = capacity if capacity is not None else ALL_CELLS

    @classmethod
    def initial(cls, cell_size: int = CELL_SIZE, capacity: Optional[int] = None) -> "Snake":
        """Build the default snake: head at INITIAL_HEAD, body trailing to the left."""
        head_x, head_y = INITIAL_HEAD
        positions = [(head_x - i * cell_size, head_y) for i in range(INITIAL_LENGTH)]
        return cls(positions, cell_size=cell_size, capacity=capacity)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def length(self) -> int:
        return len(self.positions)

    def advance(self, direction: str) -> None:
        """
        Shift every segment onto its predecessor, then move the head one cell.

        The tail position is discarded by the overwrite.
        """
        for i in range(len(self.positions) - 1, 0, -1):
            self.positions[i] = self.positions[i - 1]

        dx, dy = DIRECTION_DELTAS[direction]
        head_x, head_y = self.positions[0]
        self.positions[0] = (head_x + dx * self.cell_size, head_y + dy * self.cell_size)

    def grow(self) -> None:
        """
        Add one segment.

        The new segment duplicates the current tail, so the next advance
        leaves the previous tail position occupied.
        """
        if len(self.positions) >= self.capacity:
            return
        self.positions.append(self.positions[-1])
