"""
Per-session tuning for the game loop.
"""

from dataclasses import dataclass

from .constants import (
    GRID_SIZE,
    MIN_GRID_SIZE,
    BASE_SPEED,
    MIN_SPEED,
    SPEED_INCREMENT,
    NODES_PER_SPEED_INCREASE,
    MAX_QUEUED_DIRECTIONS,
    MAX_SPAWN_ATTEMPTS,
    GAME_OVER_DURATION,
)


@dataclass(frozen=True)
class GameConfig:
    """
    Settings a GameLoop is constructed with.

    Attributes:
        grid_size: width and height of the square board, in cells
        base_speed: starting move interval in milliseconds
        min_speed: floor for the move interval
        speed_increment: milliseconds shaved off per speed step
        nodes_per_speed_increase: foods collected per speed step
        max_queued_directions: depth of the turn buffer
        max_spawn_attempts: random samples tried before enumerating free cells
        game_over_duration: length of the post-collision glitch window (ms)
    """

    grid_size: int = GRID_SIZE
    base_speed: int = BASE_SPEED
    min_speed: int = MIN_SPEED
    speed_increment: int = SPEED_INCREMENT
    nodes_per_speed_increase: int = NODES_PER_SPEED_INCREASE
    max_queued_directions: int = MAX_QUEUED_DIRECTIONS
    max_spawn_attempts: int = MAX_SPAWN_ATTEMPTS
    game_over_duration: int = GAME_OVER_DURATION

    def __post_init__(self):
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(
                f"grid_size must be at least {MIN_GRID_SIZE}, got {self.grid_size}"
            )
        if self.min_speed <= 0 or self.base_speed < self.min_speed:
            raise ValueError(
                f"Invalid speeds: base_speed={self.base_speed}, min_speed={self.min_speed}"
            )
        if self.nodes_per_speed_increase <= 0:
            raise ValueError("nodes_per_speed_increase must be positive")

    def move_interval(self, score: int) -> int:
        """Move interval after `score` foods have been collected."""
        steps = score // self.nodes_per_speed_increase
        return max(self.min_speed, self.base_speed - self.speed_increment * steps)
