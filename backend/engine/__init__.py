"""
Frame-driven game loop for CRT Snake.

Time comes from an injectable Clock and frames run through an explicit
FrameScheduler, so sessions can be stepped deterministically in tests.
"""

from .clock import Clock, MonotonicClock, ManualClock
from .scheduler import FrameScheduler
from .listener import GameListener, GameOverEvent
from .game_loop import GameLoop

__all__ = [
    'Clock',
    'MonotonicClock',
    'ManualClock',
    'FrameScheduler',
    'GameListener',
    'GameOverEvent',
    'GameLoop',
]
