"""
Frame scheduler - an explicit replacement for self-rescheduling frame callbacks.

Callbacks requested while a frame is running are held for the next frame, so
a callback that re-requests itself runs exactly once per frame.
"""

import logging
from typing import Callable, List, Optional

from .clock import Clock, MonotonicClock

logger = logging.getLogger(__name__)

DEFAULT_FPS = 60

FrameCallback = Callable[[], None]


class FrameScheduler:
    """
    Runs queued frame callbacks at a fixed display rate.

    Attributes:
        clock: time source used for pacing
        frame_ms: target duration of one frame
        frame_count: frames executed so far
    """

    def __init__(self, clock: Optional[Clock] = None, fps: int = DEFAULT_FPS):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.clock = clock or MonotonicClock()
        self.frame_ms = 1000.0 / fps
        self.frame_count = 0
        self._pending: List[FrameCallback] = []

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def request_frame(self, callback: FrameCallback) -> None:
        """Run callback once on the next frame."""
        self._pending.append(callback)

    def cancel_all(self) -> int:
        """Drop every pending callback. Returns how many were dropped."""
        dropped = len(self._pending)
        self._pending = []
        return dropped

    def run_frame(self) -> int:
        """
        Execute the callbacks queued before this frame started.

        Returns:
            Number of callbacks executed.
        """
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback()
        self.frame_count += 1
        return len(callbacks)

    def run(
        self,
        max_frames: Optional[int] = None,
        before_frame: Optional[FrameCallback] = None
    ) -> int:
        """
        Run frames until nothing is pending or max_frames is reached.

        Args:
            max_frames: Upper bound on frames to run (None for no bound)
            before_frame: Called at the start of every frame, before callbacks

        Returns:
            Number of frames run.
        """
        frames = 0
        while self._pending and (max_frames is None or frames < max_frames):
            started = self.clock.now()
            if before_frame is not None:
                before_frame()
            self.run_frame()
            frames += 1

            remaining = self.frame_ms - (self.clock.now() - started)
            if remaining > 0:
                self.clock.sleep(remaining / 1000.0)

        if self._pending:
            logger.debug(f"Stopped after {frames} frames with {len(self._pending)} callbacks pending")
        return frames
