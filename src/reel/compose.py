"""Common compose functions for merging per-track samples."""

from __future__ import annotations

from typing import Callable, TypeVar

A = TypeVar("A")

ComposeFn = Callable[[list[A]], A]


def compose_last(values: list[A]) -> A:
    """Return the value of the last track. Safe generic default."""
    return values[-1]


def compose_first(values: list[A]) -> A:
    """Return the value of the first track."""
    return values[0]


def compose_sum(values: list[float]) -> float:
    """Sum all values. Works with any numeric type supporting addition."""
    return sum(values)


def compose_mean(values: list[float]) -> float:
    """Average all values."""
    return sum(values) / len(values)


def merge(samples: list[A | None], compose_fn: ComposeFn = compose_last) -> A | None:
    """Merge a timeline sample into one value.

    Undefined (``None``) lanes are skipped; returns None when no lane is
    defined.

    >>> merge([None, 1.0, 2.0], compose_sum)
    3.0
    >>> merge([None, None]) is None
    True
    """
    values = [s for s in samples if s is not None]
    if not values:
        return None
    return compose_fn(values)
