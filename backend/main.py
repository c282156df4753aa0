import argparse
import logging
import os
import random
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from data_access.high_score import HighScoreStore
from domain.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    CELL_SIZE,
    DEFAULT_HIGH_SCORE_FILE,
    RESTART_KEY,
    TICK_MS,
    VALID_MOVES,
)
from domain.game_state import GameState
from domain.rules import new_game, step
from players.base import Player
from players.keyboard_player import KeyboardPlayer
from services.scheduler import FixedIntervalScheduler

logger = logging.getLogger(__name__)


@dataclass
class GameConfig:
    """Board geometry, tick period and where the high score is kept."""
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    cell_size: int = CELL_SIZE
    tick_ms: int = TICK_MS
    high_score_file: str = DEFAULT_HIGH_SCORE_FILE

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {self.cell_size}")
        for name, value in (("width", self.width), ("height", self.height)):
            if value <= 0 or value % self.cell_size != 0:
                raise ValueError(
                    f"Board {name} must be a positive multiple of the cell size "
                    f"({self.cell_size}), got {value}"
                )
        if self.tick_ms <= 0:
            raise ValueError(f"Tick period must be positive, got {self.tick_ms}")


class SnakeGame:
    """
    Manages:
      - The current GameState
      - The player feeding directions
      - The tick scheduler (stopped on game over, restarted on restart)
      - The high score, loaded at startup and saved when beaten
    """
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store: Optional[HighScoreStore] = None,
        scheduler: Optional[FixedIntervalScheduler] = None,
        player: Optional[Player] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or GameConfig()
        self.store = store or HighScoreStore(self.config.high_score_file)
        self.scheduler = scheduler or FixedIntervalScheduler(self.config.tick_ms)
        self.player = player or KeyboardPlayer()
        self.rng = rng or random.Random()

        self.high_score = self.store.load()
        self.games_played = 0
        self.state: GameState = self._fresh_state()

    def _fresh_state(self) -> GameState:
        return new_game(
            self.config.width,
            self.config.height,
            self.config.cell_size,
            high_score=self.high_score,
            rng=self.rng
        )

    def start(self):
        """Start ticking the current game."""
        self.scheduler.start()
        logger.info(f"Game started (high score {self.high_score}, tick {self.config.tick_ms} ms)")

    def tick(self) -> GameState:
        """
        Execute one tick:
          1) If the game is over, do nothing
          2) Ask the player for the direction
          3) Apply the transition (food, collision, move)
          4) On game over, stop ticking and record the high score
        """
        if not self.state.is_running:
            return self.state

        direction = self.player.get_move(self.state)
        self.state = step(self.state, direction, self.rng)

        if not self.state.is_running:
            self.end_game()

        return self.state

    def end_game(self):
        self.scheduler.stop()
        self.games_played += 1
        logger.info(
            f"Game Over: {self.state.death_reason} collision after {self.state.tick_number} ticks, "
            f"score {self.state.score}"
        )
        logger.debug(f"Final board:\n{self.state.print_board()}")

        if self.state.score > self.high_score:
            self.high_score = self.state.score
            self.state = self.state.copy(high_score=self.high_score)
            logger.info(f"New high score: {self.high_score}")
            self.store.save(self.high_score)

    def handle_key(self, key: str) -> bool:
        """
        Route a key press.

        Directions go to the player while the game runs; the restart key
        only counts once the game is over. Returns True if the game was
        restarted and the window should redraw.
        """
        if not self.state.is_running:
            if key == RESTART_KEY:
                self.restart()
                return True
            return False

        if key in VALID_MOVES:
            self.player.press(key)
        return False

    def restart(self):
        """Reset snake, food, score and direction, then resume ticking."""
        self.player.reset()
        self.state = self._fresh_state()
        self.scheduler.start()
        logger.info(f"Game restarted (game #{self.games_played + 1})")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Snake in a desktop window. Arrow keys steer, 'R' restarts after a game over."
    )
    parser.add_argument("--high-score-file", type=str, required=False,
                        default=os.getenv("SNAKE_HIGH_SCORE_FILE", DEFAULT_HIGH_SCORE_FILE),
                        help="Text file holding the high score")
    parser.add_argument("--tick-ms", type=int, required=False,
                        default=os.getenv("SNAKE_TICK_MS", str(TICK_MS)),
                        help="Milliseconds between game ticks")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every food and collision event")
    return parser.parse_args(argv)


def main(argv=None):
    load_dotenv()
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = GameConfig(tick_ms=args.tick_ms, high_score_file=args.high_score_file)
    game = SnakeGame(config, rng=random.Random(args.seed))

    # pygame is only imported once a window opens
    from app import run
    run(game)


if __name__ == "__main__":
    main()
