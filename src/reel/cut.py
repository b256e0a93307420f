"""Cuts: behaviors restricted to a bounded, half-open time interval."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from .behavior import A, Behavior, T


class InvalidCutError(ValueError):
    """Raised when a cut would stop before it starts."""


@dataclass(frozen=True, eq=False)
class Cut(Generic[T, A]):
    """A slice ``[start_t, stop_t)`` of a behavior.

    The bounds are expressed in the behavior's own time: sampling a cut at
    *t* reacts the behavior at *t*, not at ``t - start_t``. Several cuts may
    share one behavior.
    """

    behavior: Behavior[T, A]
    start_t: T
    stop_t: T

    def __post_init__(self) -> None:
        if self.stop_t < self.start_t:
            raise InvalidCutError(
                f"Cut stops at {self.stop_t!r} before it starts at {self.start_t!r}"
            )

    @classmethod
    def new(cls, behavior: Behavior[T, A], start_t: T, stop_t: T) -> Cut[T, A]:
        return cls(behavior, start_t, stop_t)

    def dur(self) -> T:
        return self.stop_t - self.start_t

    def covers(self, t: T) -> bool:
        return self.start_t <= t < self.stop_t

    def sample(self, t: T) -> A | None:
        """React the behavior at *t*, or None when *t* is outside the cut."""
        if not self.covers(t):
            return None
        return self.behavior.react(t)


def cut(behavior: Behavior[T, A], start_t: T, stop_t: T) -> Cut[T, A]:
    """Create a cut, raising ``InvalidCutError`` if ``stop_t < start_t``.

    >>> from reel.behavior import from_fn
    >>> c = cut(from_fn(lambda t: t * 2.0), 0.0, 1.0)
    >>> c.sample(0.5), c.sample(1.0)
    (1.0, None)
    """
    return Cut(behavior, start_t, stop_t)
