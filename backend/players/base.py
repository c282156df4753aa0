"""
Base player interface for the game engine.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning the direction the snake
    should move on the next tick given the current game state.
    """

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError

    def press(self, key: str) -> bool:
        """Feed a key press to the player. Players without input ignore it."""
        return False

    def reset(self) -> None:
        """Forget any input collected for a previous game."""
