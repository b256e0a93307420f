"""Time generators: the source of "now" for a scheduler."""

from __future__ import annotations

import logging
from typing import Generic, Protocol, TypeVar, runtime_checkable

log = logging.getLogger(__name__)

Time = TypeVar("Time")


class TimeDirectionError(ValueError):
    """Raised when a forward-only generator is asked to move backwards."""


@runtime_checkable
class TimeGenerator(Protocol[Time]):

    @property
    def delta(self) -> Time: ...

    def current(self) -> Time: ...

    def tick(self) -> Time: ...

    def untick(self) -> Time: ...

    def reset(self) -> None: ...

    def set(self, value: Time) -> None: ...

    def change_delta(self, delta: Time) -> None: ...


class SimpleTimeGenerator(Generic[Time]):
    """Generates times by adding or subtracting a fixed delta.

    Create one from its initial value (typically ``0.0``) and a delta. A
    program running at 100 Hz wants a delta of ``0.01``; if the frame rate
    drops, call ``change_delta`` to adapt. Any type supporting ``+`` and
    ``-`` works (float seconds, integer frames, ``Fraction``).

    No range checking is done: unticking below the reset value yields
    earlier (possibly negative) times.

    >>> gen = SimpleTimeGenerator(0.0, 0.5)
    >>> gen.tick(), gen.tick(), gen.current()
    (0.0, 0.5, 1.0)
    """

    def __init__(self, reset_value: Time = 0.0, delta: Time = 1.0) -> None:
        self._current = reset_value
        self._reset_value = reset_value
        self._delta = delta

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(current={self._current!r}, "
            f"reset_value={self._reset_value!r}, delta={self._delta!r})"
        )

    @property
    def delta(self) -> Time:
        return self._delta

    @property
    def reset_value(self) -> Time:
        return self._reset_value

    def current(self) -> Time:
        return self._current

    def tick(self) -> Time:
        """Return the current time, then move forward by delta."""
        t = self._current
        self._current = t + self._delta
        return t

    def untick(self) -> Time:
        """Return the current time, then move backwards by delta."""
        t = self._current
        self._current = t - self._delta
        return t

    def reset(self) -> None:
        self.set(self._reset_value)

    def set(self, value: Time) -> None:
        self._current = value

    def change_delta(self, delta: Time) -> None:
        log.debug("Time delta changed from %r to %r", self._delta, delta)
        self._delta = delta


class MonotonicTimeGenerator(SimpleTimeGenerator[Time]):
    """A generator that only moves forward.

    ``untick``, negative deltas and seeking backwards raise
    ``TimeDirectionError``. ``reset`` is allowed and restarts playback.
    """

    def __init__(self, reset_value: Time = 0.0, delta: Time = 1.0) -> None:
        if delta < 0:
            raise TimeDirectionError(f"Negative delta {delta!r} on a monotonic generator")
        super().__init__(reset_value, delta)

    def untick(self) -> Time:
        raise TimeDirectionError("Monotonic time generator cannot move backwards")

    def reset(self) -> None:
        self._current = self._reset_value

    def set(self, value: Time) -> None:
        if value < self._current:
            raise TimeDirectionError(
                f"Cannot seek back from {self._current!r} to {value!r}"
            )
        super().set(value)

    def change_delta(self, delta: Time) -> None:
        if delta < 0:
            raise TimeDirectionError(f"Negative delta {delta!r} on a monotonic generator")
        super().change_delta(delta)
