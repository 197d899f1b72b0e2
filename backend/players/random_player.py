"""
Random player implementation - picks random safe moves.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState
from .base import Player, heading, safe_moves


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        valid_moves = [move for move, _ in safe_moves(game_state)]

        # Boxed in: keep heading and accept the crash
        if not valid_moves:
            return heading(game_state)

        return self.rng.choice(sorted(valid_moves))
