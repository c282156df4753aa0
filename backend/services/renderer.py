"""
Frame renderer for the Snake window.

Draws a GameState onto a PIL image:
- Running: food, snake (green head, white body) and the score HUD
- Game over: score, high score and the restart prompt

The renderer only reads the state; the window decides where the
image goes.
"""

import logging
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.game_state import GameState

logger = logging.getLogger(__name__)


class ColorScheme:
    """Window colors"""

    BACKGROUND = "#0000FF"
    FOOD = "#FF0000"
    SNAKE_HEAD = "#00FF00"
    SNAKE_BODY = "#FFFFFF"
    HUD_TEXT = "#FFFFFF"
    GAME_OVER_TITLE = "#FF0000"
    GAME_OVER_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class FrameRenderer:
    """Render game states into RGB images the size of the board"""

    def __init__(self, font_size: int = 12):
        # Try to load a font, fallback to default if not available
        try:
            self.font = ImageFont.truetype("DejaVuSans.ttf", font_size)
        except Exception:
            self.font = ImageFont.load_default()

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', (state.width, state.height), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        if state.is_running:
            self._draw_food(draw, state)
            self._draw_snake(draw, state)
            self._draw_hud(draw, state)
        else:
            self._draw_game_over(draw, state)

        return img

    def _draw_cell(self, draw: ImageDraw.ImageDraw, x: int, y: int, size: int, color: Tuple[int, int, int]):
        draw.rectangle([x, y, x + size - 1, y + size - 1], fill=color)

    def _draw_food(self, draw: ImageDraw.ImageDraw, state: GameState):
        food_x, food_y = state.food
        self._draw_cell(draw, food_x, food_y, state.cell_size, hex_to_rgb(ColorScheme.FOOD))

    def _draw_snake(self, draw: ImageDraw.ImageDraw, state: GameState):
        for idx, (x, y) in enumerate(state.snake_positions):
            color = ColorScheme.SNAKE_HEAD if idx == 0 else ColorScheme.SNAKE_BODY
            self._draw_cell(draw, x, y, state.cell_size, hex_to_rgb(color))

    def _draw_hud(self, draw: ImageDraw.ImageDraw, state: GameState):
        draw.text((10, 8), f"Score: {state.score}", fill=hex_to_rgb(ColorScheme.HUD_TEXT), font=self.font)

    def _draw_game_over(self, draw: ImageDraw.ImageDraw, state: GameState):
        center_x = state.width // 2
        center_y = state.height // 2
        text_color = hex_to_rgb(ColorScheme.GAME_OVER_TEXT)

        draw.text((center_x - 30, center_y - 12), "Game Over",
                  fill=hex_to_rgb(ColorScheme.GAME_OVER_TITLE), font=self.font)
        draw.text((center_x - 30, center_y + 8), f"Score: {state.score}", fill=text_color, font=self.font)
        draw.text((center_x - 30, center_y + 28), f"High Score: {state.high_score}", fill=text_color, font=self.font)
        draw.text((center_x - 60, center_y + 53), "Press 'R' to Try Again", fill=text_color, font=self.font)
