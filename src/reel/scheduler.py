"""Step-by-step timeline playback driven by a time generator."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from .behavior import A, T
from .clock import TimeGenerator
from .timeline import Timeline

log = logging.getLogger(__name__)

Output = TypeVar("Output")


@dataclass
class Scheduler(Generic[T, A, Output]):
    """Couples one timeline with one time generator.

    Each call to ``advance`` or ``rewind`` performs exactly one step; pacing
    in real time is up to the caller. Sampled values go through
    ``apply_fn`` (identity when unset) and are then handed to ``output_fn``.
    """

    timeline: Timeline[T, A]
    time_generator: TimeGenerator[T]
    apply_fn: Callable[[list[A | None]], Output] | None = None
    output_fn: Callable[[Output], None] | None = None

    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False
    )

    @property
    def now(self) -> T:
        """The time the next ``advance`` will sample."""
        return self.time_generator.current()

    def _apply(self, samples: list[A | None]) -> Output:
        if self.apply_fn is None:
            return samples  # type: ignore[return-value]
        return self.apply_fn(samples)

    def render_frame(self, t: T) -> Output:
        """Sample the timeline at *t* and send it through the output pipeline."""
        output = self._apply(self.timeline.sample(t))
        if self.output_fn is not None:
            self.output_fn(output)
        return output

    def advance(self) -> Output:
        with self._lock:
            t = self.time_generator.tick()
            log.debug("advance to %r", t)
            return self.render_frame(t)

    def rewind(self) -> Output:
        with self._lock:
            t = self.time_generator.untick()
            log.debug("rewind to %r", t)
            return self.render_frame(t)

    def seek(self, t: T) -> Output:
        """Move the generator to *t* and sample there without stepping."""
        with self._lock:
            self.time_generator.set(t)
            log.debug("seek to %r", t)
            return self.render_frame(t)

    def sample_now(self) -> Output:
        with self._lock:
            return self.render_frame(self.time_generator.current())

    def reset(self) -> None:
        """Reset the time generator. The timeline holds no time state."""
        with self._lock:
            self.time_generator.reset()
            log.debug("reset to %r", self.time_generator.current())
