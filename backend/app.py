"""
Desktop window for the Snake game.

One cooperative loop on the main thread handles keyboard events, polls
the tick scheduler and redraws after every tick, so input and game
updates never run concurrently.
"""

import os
import logging
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEO_CENTERED", "1")

import pygame  # noqa: E402

from domain.constants import UP, DOWN, LEFT, RIGHT, RESTART_KEY  # noqa: E402
from domain.game_state import GameState  # noqa: E402
from services.renderer import FrameRenderer  # noqa: E402
from services.scheduler import FixedIntervalScheduler  # noqa: E402

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake Game"
# Longest the loop sleeps between input polls; game speed is set by the tick scheduler
POLL_MS = 8

KEY_MAP = {
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_r: RESTART_KEY,
}


def translate_key(key: int) -> Optional[str]:
    """Map a pygame key code to a game key, or None if the game ignores it."""
    return KEY_MAP.get(key)


class PygameView:
    """Draws game states into a pygame surface"""

    def __init__(self, screen: pygame.Surface, renderer: Optional[FrameRenderer] = None):
        self.screen = screen
        self.renderer = renderer or FrameRenderer()

    def draw(self, state: GameState):
        img = self.renderer.render_frame(state)
        surface = pygame.image.frombytes(img.tobytes(), img.size, img.mode)
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()


def idle_ms(scheduler: FixedIntervalScheduler) -> int:
    """How long the loop may sleep before it polls again."""
    remaining = scheduler.time_until_next_tick()
    if remaining is None:
        return POLL_MS
    return int(min(remaining, POLL_MS))


def run(game) -> None:
    """Open the window and play until it is closed or Escape is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((game.config.width, game.config.height))
        pygame.display.set_caption(WINDOW_TITLE)
        view = PygameView(screen)

        game.start()
        view.draw(game.state)

        running = True
        while running:
            # 1) input
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    key = translate_key(event.key)
                    if key is not None and game.handle_key(key):
                        view.draw(game.state)

            # 2) update + render
            if running and game.scheduler.tick_due():
                game.tick()
                view.draw(game.state)

            # 3) sleep until the next tick is due, waking to poll input
            pygame.time.wait(idle_ms(game.scheduler))
    finally:
        logger.info(f"Closing window after {game.games_played} finished game(s)")
        pygame.quit()
