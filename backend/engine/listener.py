"""
Listener interface for the collaborators around the game loop
(renderer, audio, visual effects, screens, score reporting).
"""

from dataclasses import dataclass

from domain.constants import Direction


@dataclass(frozen=True)
class GameOverEvent:
    """Emitted once per session when the snake crashes."""
    collision: str
    score: int
    rank: str


class GameListener:
    """
    Base class for game loop collaborators. Every hook is a no-op, so
    subclasses override only what they need.
    """

    def on_start(self, loop) -> None:
        pass

    def on_render(self, loop, alpha: float) -> None:
        """
        Called once per frame while playing.

        alpha is the fraction (0..1) of the current move interval that has
        elapsed, for drawing between grid steps.
        """

    def on_turn(self, direction: Direction) -> None:
        pass

    def on_food_collected(self, score: int, move_interval: int) -> None:
        pass

    def on_collision(self, event: GameOverEvent) -> None:
        """The snake just crashed; the glitch window starts now."""

    def on_game_over_frame(self, event: GameOverEvent, progress: float) -> None:
        pass

    def on_game_over(self, event: GameOverEvent) -> None:
        """The glitch window finished; show the final score."""

    def on_menu(self) -> None:
        pass
