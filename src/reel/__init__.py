"""Animate and schedule code: behaviors, cuts, tracks and timelines."""

from .behavior import Behavior, Constant, FnBehavior, Keyframes, Mapped, Ramp, from_fn
from .clock import MonotonicTimeGenerator, SimpleTimeGenerator, TimeDirectionError, TimeGenerator
from .compose import ComposeFn, compose_first, compose_last, compose_mean, compose_sum, merge
from .cut import Cut, InvalidCutError, cut
from .scheduler import Scheduler
from .timeline import Timeline
from .track import Track

__all__ = [
    "Behavior",
    "ComposeFn",
    "compose_first",
    "compose_last",
    "compose_mean",
    "compose_sum",
    "Constant",
    "Cut",
    "cut",
    "FnBehavior",
    "from_fn",
    "InvalidCutError",
    "Keyframes",
    "Mapped",
    "merge",
    "MonotonicTimeGenerator",
    "Ramp",
    "Scheduler",
    "SimpleTimeGenerator",
    "TimeDirectionError",
    "TimeGenerator",
    "Timeline",
    "Track",
]

__version__ = "0.1.0"
