"""
Domain entities for the CRT Snake simulation core.

This module contains the game entities that are independent of
infrastructure concerns (scheduling, storage, HTTP).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTIONS,
    MENU, PLAYING, GAME_OVER, WALL, SELF,
    Direction, is_opposite,
)
from .config import GameConfig
from .snake import Snake, Segment
from .food import Food
from .game_state import GameState
from .ranks import RANKS, calculate_rank

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTIONS',
    'MENU', 'PLAYING', 'GAME_OVER', 'WALL', 'SELF',
    'Direction', 'is_opposite',
    'GameConfig',
    'Snake', 'Segment',
    'Food',
    'GameState',
    'RANKS', 'calculate_rank',
]
