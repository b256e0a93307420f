"""Behaviors: values of type A varying over time T."""

from __future__ import annotations

import bisect
from typing import Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


@runtime_checkable
class Behavior(Protocol[T, A]):

    def react(self, t: T) -> A | None: ...


class _BaseBehavior:
    """Shared helpers for the built-in behaviors."""

    def react(self, t):
        raise NotImplementedError

    def map(self, fn: Callable[[A], B]) -> Mapped:
        return Mapped(self, fn)


class FnBehavior(_BaseBehavior):
    def __init__(self, fn):
        self.fn = fn

    def react(self, t):
        return self.fn(t)


def from_fn(fn: Callable[[T], A | None]) -> Behavior[T, A]:
    """Create a behavior from a pure function of time.

    The function returns ``None`` where the behavior is undefined.

    >>> b = from_fn(lambda t: t * 2.0)
    >>> b.react(0.5)
    1.0
    """
    return FnBehavior(fn)


class Constant(_BaseBehavior):
    def __init__(self, value):
        self.value = value

    def react(self, t):
        return self.value


class Ramp(_BaseBehavior):
    """Linear ramp from *start_value* at *start_t* to *stop_value* at *stop_t*.

    Defined on the closed interval only; outside it ``react`` returns None.
    """

    def __init__(self, start_t, start_value, stop_t, stop_value):
        if stop_t < start_t:
            raise ValueError(f"Ramp stop {stop_t!r} is before start {start_t!r}")
        self.start_t = start_t
        self.start_value = start_value
        self.stop_t = stop_t
        self.stop_value = stop_value

    def react(self, t):
        if t < self.start_t or t > self.stop_t:
            return None
        span = self.stop_t - self.start_t
        if not span:
            return self.stop_value
        u = (t - self.start_t) / span
        return self.start_value + (self.stop_value - self.start_value) * u


class Keyframes(_BaseBehavior):
    """Piecewise-linear table of ``(t, value)`` keys.

    Holds the first value before the first key and the last value after the
    last key. An empty table is undefined everywhere.
    """

    def __init__(self, keys=()):
        self.keys = sorted(keys, key=lambda k: k[0])

    def react(self, t):
        if not self.keys:
            return None
        if t <= self.keys[0][0]:
            return self.keys[0][1]
        if t >= self.keys[-1][0]:
            return self.keys[-1][1]
        i = bisect.bisect_right(self.keys, t, key=lambda k: k[0])
        t0, v0 = self.keys[i - 1]
        t1, v1 = self.keys[i]
        u = (t - t0) / (t1 - t0)
        return v0 + (v1 - v0) * u


class Mapped(_BaseBehavior):
    """Applies *fn* to every defined value of *inner*."""

    def __init__(self, inner, fn):
        self.inner = inner
        self.fn = fn

    def react(self, t):
        value = self.inner.react(t)
        if value is None:
            return None
        return self.fn(value)
