"""
Game loop controller.

Simulation advances in discrete steps every `move_interval` milliseconds while
rendering happens on every frame, so visuals can animate between grid steps.
"""

import logging
import random
from typing import Iterable, List, Optional, Union

from domain.config import GameConfig
from domain.constants import DIRECTIONS, MENU, PLAYING, GAME_OVER, Direction
from domain.food import Food
from domain.game_state import GameState
from domain.ranks import calculate_rank
from domain.snake import Snake
from .clock import Clock
from .listener import GameListener, GameOverEvent
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Manages:
      - the MENU -> PLAYING -> GAME_OVER state machine
      - the Snake and Food for the current session
      - score and move interval
      - frame callbacks on the scheduler

    Every frame callback carries the session token it was scheduled under and
    does nothing once a newer session (restart or menu) has begun.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        scheduler: Optional[FrameScheduler] = None,
        clock: Optional[Clock] = None,
        listeners: Optional[Iterable[GameListener]] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or GameConfig()
        if scheduler is None:
            scheduler = FrameScheduler(clock)
        self.scheduler = scheduler
        self.clock = clock or scheduler.clock
        self.listeners: List[GameListener] = list(listeners or [])

        self.snake = Snake(self.config.grid_size, self.config.max_queued_directions)
        self.food = Food(self.config.grid_size, self.config.max_spawn_attempts, rng)

        self.state = MENU
        self.score = 0
        self.move_interval = self.config.base_speed
        self.collision_type: Optional[str] = None
        self.last_event: Optional[GameOverEvent] = None

        self.last_move_time = 0.0
        self.last_frame_time = 0.0
        self.frames = 0
        self.steps = 0
        self._session = 0

    def add_listener(self, listener: GameListener) -> None:
        self.listeners.append(listener)

    def _emit(self, hook: str, *args) -> None:
        for listener in self.listeners:
            getattr(listener, hook)(*args)

    @property
    def session(self) -> int:
        return self._session

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def start(self) -> None:
        """Begin a new session (also used for restart)."""
        self._session += 1
        self.state = PLAYING
        self.score = 0
        self.move_interval = self.config.base_speed
        self.collision_type = None
        self.last_event = None

        self.snake.reset()
        self.food.spawn(self.snake)

        now = self.clock.now()
        self.last_move_time = now
        self.last_frame_time = now
        self.frames = 0
        self.steps = 0

        logger.debug(f"Session {self._session} started, food at {self.food.position}")
        self._emit("on_start", self)
        self._request_frame()

    def return_to_menu(self) -> None:
        self._session += 1
        self.state = MENU
        self._emit("on_menu")

    def game_over(self, collision: str) -> None:
        """End the session and start the glitch window before the score screen."""
        self.state = GAME_OVER
        self.collision_type = collision

        event = GameOverEvent(
            collision=collision,
            score=self.score,
            rank=calculate_rank(self.score)
        )
        self.last_event = event
        logger.info(f"Game over ({collision}) with score {self.score} after {self.steps} steps")

        self._emit("on_collision", event)

        session = self._session
        started = self.clock.now()
        self.scheduler.request_frame(lambda: self._game_over_frame(session, started, event))

    # -------------------------------------------------------------------------
    # Frames
    # -------------------------------------------------------------------------

    def _request_frame(self) -> None:
        session = self._session
        self.scheduler.request_frame(lambda: self._frame(session))

    def _frame(self, session: int) -> None:
        if session != self._session or self.state != PLAYING:
            return

        now = self.clock.now()
        delta = now - self.last_frame_time
        self.last_frame_time = now
        self.food.update(delta)

        if now - self.last_move_time >= self.move_interval:
            self.update()
            self.last_move_time = now

        self.frames += 1
        self._emit("on_render", self, self.interpolation(now))

        if self.state == PLAYING:
            self._request_frame()

    def _game_over_frame(self, session: int, started: float, event: GameOverEvent) -> None:
        if session != self._session or self.state != GAME_OVER:
            return

        duration = self.config.game_over_duration
        elapsed = self.clock.now() - started
        progress = 1.0 if duration <= 0 else min(1.0, elapsed / duration)

        self._emit("on_game_over_frame", event, progress)

        if progress >= 1.0:
            self._emit("on_game_over", event)
        else:
            self.scheduler.request_frame(lambda: self._game_over_frame(session, started, event))

    def interpolation(self, now: Optional[float] = None) -> float:
        if now is None:
            now = self.clock.now()
        return min(1.0, max(0.0, (now - self.last_move_time) / self.move_interval))

    # -------------------------------------------------------------------------
    # Simulation
    # -------------------------------------------------------------------------

    def update(self) -> None:
        """Advance the simulation by one step."""
        self.steps += 1
        collision = self.snake.move()

        if collision:
            self.game_over(collision)
            return

        hx, hy = self.snake.head
        if self.food.is_at(hx, hy):
            self.collect_food()

    def collect_food(self) -> None:
        self.score += 1
        self.snake.grow()
        self.food.spawn(self.snake)

        previous = self.move_interval
        self.move_interval = self.config.move_interval(self.score)
        if self.move_interval != previous:
            logger.debug(f"Speed up: {previous}ms -> {self.move_interval}ms at score {self.score}")

        self._emit("on_food_collected", self.score, self.move_interval)

    def handle_input(self, direction: Union[Direction, str]) -> bool:
        """
        Route a directional input to the snake.

        Args:
            direction: A Direction or one of 'up', 'down', 'left', 'right'

        Returns:
            True if the turn was queued. Always False outside PLAYING.
        """
        if self.state != PLAYING:
            return False

        if isinstance(direction, str):
            direction = DIRECTIONS.get(direction.strip().lower())
            if direction is None:
                return False

        changed = self.snake.set_direction(direction)
        if changed:
            self._emit("on_turn", direction)
        return changed

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current session as a GameState.
        """
        return GameState(
            status=self.state,
            score=self.score,
            move_interval=self.move_interval,
            snake_positions=self.snake.positions,
            direction=self.snake.direction,
            queued_directions=list(self.snake.direction_queue),
            food=self.food.position,
            grid_size=self.config.grid_size,
            collision=self.collision_type
        )
