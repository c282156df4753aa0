"""
Keyboard player - turns key presses into the pending direction.
"""

import logging

from domain.constants import INITIAL_DIRECTION, OPPOSITES, VALID_MOVES
from domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)


class KeyboardPlayer(Player):
    """
    Holds the direction the snake takes on the next tick.

    A key press that asks for the exact reverse of the pending direction is
    rejected. Presses between two ticks overwrite each other, so the last
    accepted key wins.
    """

    def __init__(self, initial_direction: str = INITIAL_DIRECTION):
        self.initial_direction = initial_direction
        self.pending_direction = initial_direction

    def press(self, key: str) -> bool:
        """Apply a key press. Returns True if the pending direction changed."""
        if key not in VALID_MOVES:
            return False
        if key == OPPOSITES[self.pending_direction]:
            logger.debug(f"Ignoring reverse key {key} while heading {self.pending_direction}")
            return False
        changed = key != self.pending_direction
        self.pending_direction = key
        return changed

    def get_move(self, game_state: GameState) -> str:
        return self.pending_direction

    def reset(self) -> None:
        self.pending_direction = self.initial_direction
