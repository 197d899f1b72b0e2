"""
Greedy player - heads for the food along the shorter axis first, never
choosing an unsafe cell when a safe one exists.
"""

from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, Direction
from domain.game_state import GameState
from .base import Player, heading, safe_moves


def moves_toward_food(game_state: GameState) -> List[Direction]:
    """
    Preference ordering of moves; the ones that reduce Manhattan distance to
    the food come first. Does not check collisions.
    """
    hx, hy = game_state.head
    fx, fy = game_state.food

    prefs: List[Direction] = []
    if fx < hx:
        prefs.append(LEFT)
    elif fx > hx:
        prefs.append(RIGHT)
    if fy < hy:
        prefs.append(UP)
    elif fy > hy:
        prefs.append(DOWN)

    for d in (UP, DOWN, LEFT, RIGHT):
        if d not in prefs:
            prefs.append(d)
    return prefs


class GreedyPlayer(Player):

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        safe = {move for move, _ in safe_moves(game_state)}

        for move in moves_toward_food(game_state):
            if move in safe:
                return move

        return heading(game_state)
