"""
Player implementations for the desktop Snake game.

Players decide which direction the snake moves on each tick.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
]
