"""
Game constants for CRT Snake.
"""

from typing import NamedTuple


class Direction(NamedTuple):
    """A grid unit vector. y grows downwards, so UP is (0, -1)."""
    x: int
    y: int


def is_opposite(a: Direction, b: Direction) -> bool:
    """True when b would turn the snake straight back onto itself."""
    return a.x + b.x == 0 and a.y + b.y == 0


# Movement directions
UP = Direction(0, -1)
DOWN = Direction(0, 1)
LEFT = Direction(-1, 0)
RIGHT = Direction(1, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Logical input names (keyboard, swipe and d-pad all map onto these)
DIRECTIONS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}

# Board
GRID_SIZE = 18
MIN_GRID_SIZE = 4

# Speed (milliseconds per move)
BASE_SPEED = 150
MIN_SPEED = 50
SPEED_INCREMENT = 15
NODES_PER_SPEED_INCREASE = 5

# Input buffering and food placement
MAX_QUEUED_DIRECTIONS = 2
MAX_SPAWN_ATTEMPTS = 100

# Length of the glitch window between a collision and the score screen
GAME_OVER_DURATION = 500

# Game states
MENU = "menu"
PLAYING = "playing"
GAME_OVER = "gameover"

# Collision kinds
WALL = "wall"
SELF = "self"
