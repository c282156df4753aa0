"""
Domain entities for the desktop Snake game.

This module contains the core game entities and rules that are independent
of infrastructure concerns (window, keyboard, file storage).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES
from .snake import Snake
from .food import Food
from .game_state import GameState, GameStatus
from .rules import check_collision, is_collision, new_game, step

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES',
    'Snake',
    'Food',
    'GameState',
    'GameStatus',
    'check_collision',
    'is_collision',
    'new_game',
    'step',
]
