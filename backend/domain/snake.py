"""
Snake entity for the game engine.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Tuple

from .constants import (
    GRID_SIZE,
    MAX_QUEUED_DIRECTIONS,
    RIGHT,
    WALL,
    SELF,
    Direction,
    is_opposite,
)


@dataclass
class Segment:
    """One occupied grid cell, optionally carrying a display label."""
    x: int
    y: int
    label: Optional[str] = None


def segment_label(counter: int) -> str:
    return f"DATA-{counter:03d}"


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        body: deque of Segments from head at index 0 to tail at the end
        direction: the direction applied on the last move
        direction_queue: turns requested but not yet applied (oldest first)
        segment_counter: source of labels for new head segments
    """

    def __init__(self, grid_size: int = GRID_SIZE, max_queued: int = MAX_QUEUED_DIRECTIONS):
        self.grid_size = grid_size
        self.max_queued = max_queued
        self.body: Deque[Segment] = deque()
        self.direction: Direction = RIGHT
        self.direction_queue: Deque[Direction] = deque()
        self.segment_counter = 2
        self.reset()

    def reset(self) -> None:
        """Place a three segment body in the middle of the board, heading right."""
        center_x = self.grid_size // 2
        center_y = self.grid_size // 2

        self.body = deque([
            Segment(center_x, center_y, segment_label(1)),
            Segment(center_x - 1, center_y, segment_label(0)),
            Segment(center_x - 2, center_y, None),
        ])
        self.direction = RIGHT
        self.direction_queue.clear()
        self.segment_counter = 2

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        segment = self.body[0]
        return (segment.x, segment.y)

    @property
    def positions(self) -> List[Tuple[int, int]]:
        return [(s.x, s.y) for s in self.body]

    @property
    def effective_direction(self) -> Direction:
        """The direction in force once every queued turn has been applied."""
        if self.direction_queue:
            return self.direction_queue[-1]
        return self.direction

    def __len__(self) -> int:
        return len(self.body)

    def set_direction(self, requested: Direction) -> bool:
        """
        Queue a turn.

        Reversals and repeats of the effective direction are refused, as is
        anything once the queue already holds max_queued turns.

        Returns:
            True if the turn was queued.
        """
        effective = self.effective_direction

        if is_opposite(effective, requested):
            return False
        if effective == requested:
            return False
        if len(self.direction_queue) >= self.max_queued:
            return False

        self.direction_queue.append(requested)
        return True

    def move(self) -> Optional[str]:
        """
        Advance one cell.

        Returns:
            None on a clean move, otherwise the collision kind ('wall' or
            'self'). The body is left untouched when a collision is reported.
        """
        if self.direction_queue:
            self.direction = self.direction_queue.popleft()

        hx, hy = self.head
        nx = hx + self.direction.x
        ny = hy + self.direction.y

        if nx < 0 or nx >= self.grid_size or ny < 0 or ny >= self.grid_size:
            return WALL

        # The last segment is skipped: it leaves its cell on this same step.
        # After grow() the tail is doubled, so the copy in front of it still counts.
        last = len(self.body) - 1
        for i, segment in enumerate(self.body):
            if i == last:
                break
            if segment.x == nx and segment.y == ny:
                return SELF

        self.body.appendleft(Segment(nx, ny, segment_label(self.segment_counter)))
        self.body.pop()
        return None

    def grow(self) -> None:
        """Duplicate the tail; the copy separates on the next move."""
        tail = self.body[-1]
        self.body.append(Segment(tail.x, tail.y, None))
        self.segment_counter += 1

    def is_head_at(self, x: int, y: int) -> bool:
        segment = self.body[0]
        return segment.x == x and segment.y == y

    def occupies(self, x: int, y: int) -> bool:
        """Check whether any segment sits on (x, y)."""
        return any(s.x == x and s.y == y for s in self.body)
