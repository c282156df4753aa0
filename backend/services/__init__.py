"""
Services used by the game window: the tick scheduler and the frame renderer.
"""

from .scheduler import FixedIntervalScheduler
from .renderer import FrameRenderer, ColorScheme

__all__ = [
    'FixedIntervalScheduler',
    'FrameRenderer',
    'ColorScheme',
]
