"""
Data access layer for the desktop Snake game.

The only persisted value is the high score, kept in a text file.
"""

from .high_score import load_high_score, save_high_score, HighScoreStore

__all__ = [
    'load_high_score',
    'save_high_score',
    'HighScoreStore',
]
