"""
Food entity - the evidence node the snake collects.
"""

import random
from typing import Optional, Tuple

from .constants import GRID_SIZE, MAX_SPAWN_ATTEMPTS
from .snake import Snake

PULSE_RATE = 0.005  # radians per millisecond


class Food:
    """
    A single food cell.

    Placement samples random cells; when the sampling budget runs out the free
    cells are enumerated so a crowded board still gets a valid spot.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        max_attempts: int = MAX_SPAWN_ATTEMPTS,
        rng: Optional[random.Random] = None
    ):
        self.grid_size = grid_size
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()
        self.x = 0
        self.y = 0
        self.pulse_phase = 0.0

    @property
    def position(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def spawn(self, snake: Snake) -> Tuple[int, int]:
        """
        Move the food to a random cell not occupied by the snake.

        Only a completely full board leaves the food on an occupied cell.
        """
        for _ in range(self.max_attempts):
            self.x = self.rng.randrange(self.grid_size)
            self.y = self.rng.randrange(self.grid_size)
            if not snake.occupies(self.x, self.y):
                break
        else:
            occupied = set(snake.positions)
            free_cells = [
                (x, y)
                for y in range(self.grid_size)
                for x in range(self.grid_size)
                if (x, y) not in occupied
            ]
            if free_cells:
                self.x, self.y = self.rng.choice(free_cells)

        self.pulse_phase = 0.0
        return self.position

    def is_at(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y

    def update(self, delta_ms: float) -> None:
        """Advance the pulse animation."""
        self.pulse_phase += delta_ms * PULSE_RATE
