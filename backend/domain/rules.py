"""
Game rules: collision detection and the per-tick state transition.

`step` is pure: it takes a snapshot and returns a new one, so the loop
controller and tests can drive the game without a timer.
"""

import logging
import random
from typing import List, Tuple, Optional

from .constants import INITIAL_DIRECTION
from .food import Food
from .game_state import GameState, GameStatus
from .snake import Snake

logger = logging.getLogger(__name__)


def check_collision(positions: List[Tuple[int, int]], width: int, height: int) -> Optional[str]:
    """
    Return the reason the head collided, or None.

    Self-collision (head on any later segment) is checked before the walls.
    """
    head_x, head_y = positions[0]
    for i in range(len(positions) - 1, 0, -1):
        if positions[i] == (head_x, head_y):
            return "self"

    if head_x < 0 or head_x >= width or head_y < 0 or head_y >= height:
        return "wall"

    return None


def is_collision(positions: List[Tuple[int, int]], width: int, height: int) -> bool:
    return check_collision(positions, width, height) is not None


def new_game(
    width: int,
    height: int,
    cell_size: int,
    high_score: int = 0,
    rng: Optional[random.Random] = None
) -> GameState:
    """Create a fresh running game with the default snake and a random food cell."""
    snake = Snake.initial(cell_size, capacity=(width * height) // (cell_size * cell_size))
    food = Food()
    food.relocate(width, height, cell_size, rng)
    return GameState(
        tick_number=0,
        snake_positions=list(snake.positions),
        food=food.position,
        direction=INITIAL_DIRECTION,
        score=0,
        high_score=high_score,
        status=GameStatus.RUNNING,
        width=width,
        height=height,
        cell_size=cell_size,
    )


def step(state: GameState, direction: str, rng: Optional[random.Random] = None) -> GameState:
    """
    Apply one tick to `state` and return the resulting snapshot.

    Within a tick: eat food if the head is on it, then check collisions,
    then advance the snake by `direction` if it is still alive. A finished
    game is returned unchanged.
    """
    if not state.is_running:
        return state

    capacity = (state.width * state.height) // (state.cell_size * state.cell_size)
    snake = Snake(state.snake_positions, cell_size=state.cell_size, capacity=capacity)
    food = Food(state.food)
    score = state.score

    if snake.head == food.position:
        snake.grow()
        score += 1
        food.relocate(state.width, state.height, state.cell_size, rng)
        logger.debug(f"Food eaten at tick {state.tick_number}, score {score}, new food at {food.position}")

    reason = check_collision(snake.positions, state.width, state.height)
    if reason is not None:
        logger.debug(f"Collision ({reason}) at tick {state.tick_number}, head {snake.head}")
        return state.copy(
            tick_number=state.tick_number + 1,
            snake_positions=list(snake.positions),
            food=food.position,
            score=score,
            status=GameStatus.GAME_OVER,
            death_reason=reason,
        )

    snake.advance(direction)
    return state.copy(
        tick_number=state.tick_number + 1,
        snake_positions=list(snake.positions),
        food=food.position,
        direction=direction,
        score=score,
    )
