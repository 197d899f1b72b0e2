"""
Base player interface for the autopilot.
"""

import random
from typing import List, Optional, Tuple

from domain.constants import VALID_MOVES, Direction, is_opposite
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state and returns the direction it
    wants, or None to keep going straight. Its choice goes through the same
    GameLoop.handle_input path as a keypress.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of UP, DOWN, LEFT, RIGHT, or None
        """
        raise NotImplementedError


def heading(game_state: GameState) -> Direction:
    """Direction the snake will travel once queued turns are applied."""
    if game_state.queued_directions:
        return game_state.queued_directions[-1]
    return game_state.direction


def safe_moves(game_state: GameState) -> List[Tuple[Direction, Tuple[int, int]]]:
    """
    Moves that neither reverse the snake nor hit a wall or its own body.

    The tail is not counted as an obstacle since it moves away this step.
    """
    current = heading(game_state)
    head_x, head_y = game_state.head
    body = game_state.snake_positions[:-1]

    moves = []
    for move in VALID_MOVES:
        if is_opposite(current, move):
            continue
        new_x, new_y = head_x + move.x, head_y + move.y
        if (new_x < 0 or new_x >= game_state.grid_size or
                new_y < 0 or new_y >= game_state.grid_size):
            continue
        if (new_x, new_y) in body:
            continue
        moves.append((move, (new_x, new_y)))
    return moves
