"""
GameState entity - a snapshot of a session at a point in time.
"""

from typing import List, Tuple, Optional

from .constants import GAME_OVER, Direction


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        status: 'menu', 'playing' or 'gameover'
        score: foods collected this session
        move_interval: current milliseconds between simulation steps
        snake_positions: list of (x, y), head first
        direction: direction applied on the last move
        queued_directions: turns waiting to be applied
        food: (x, y) of the food
        grid_size: board width and height
        collision: 'wall' or 'self' once the session has ended, else None
    """

    def __init__(
        self,
        status: str,
        score: int,
        move_interval: int,
        snake_positions: List[Tuple[int, int]],
        direction: Direction,
        queued_directions: List[Direction],
        food: Tuple[int, int],
        grid_size: int,
        collision: Optional[str] = None
    ):
        self.status = status
        self.score = score
        self.move_interval = move_interval
        self.snake_positions = snake_positions
        self.direction = direction
        self.queued_directions = queued_directions
        self.food = food
        self.grid_size = grid_size
        self.collision = collision

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head (X once the snake has crashed)
        Row 0 is at the top, matching screen coordinates.
        """
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        # Draw tail first so the head wins on overlapping cells
        for pos_idx in range(len(self.snake_positions) - 1, -1, -1):
            x, y = self.snake_positions[pos_idx]
            if pos_idx == 0:
                board[y][x] = 'X' if self.status == GAME_OVER else 'H'
            else:
                board[y][x] = 'S'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.grid_size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState status={self.status}, score={self.score}, "
            f"head={self.head}, food={self.food}, length={len(self.snake_positions)}>"
        )
