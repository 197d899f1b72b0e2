"""
Autopilot players for headless CRT Snake sessions.
"""

from .base import Player, heading, safe_moves
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer

PLAYERS = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

__all__ = [
    'Player',
    'heading',
    'safe_moves',
    'RandomPlayer',
    'GreedyPlayer',
    'PLAYERS',
]
