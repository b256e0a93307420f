"""Tracks: one lane of cuts with highest-start-wins overlap resolution."""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass, field
from typing import Generic, Iterator, Self

from .behavior import A, Behavior, T
from .cut import Cut

log = logging.getLogger(__name__)


@dataclass(eq=False)
class Track(Generic[T, A]):
    """An ordered collection of cuts sharing a payload type.

    Cuts are kept sorted by ``start_t``; cuts with equal starts stay in
    insertion order. When several cuts cover a time, the one with the
    greatest ``start_t`` wins, and among equal starts the one added last.
    """

    name: str = ""
    cuts: list[Cut[T, A]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cuts.sort(key=lambda c: c.start_t)

    def add_cut(self, cut: Cut[T, A]) -> Self:
        bisect.insort(self.cuts, cut, key=lambda c: c.start_t)
        return self

    def add(self, behavior: Behavior[T, A], start_t: T, stop_t: T) -> Self:
        return self.add_cut(Cut(behavior, start_t, stop_t))

    def remove_cut(self, cut: Cut[T, A]) -> Self:
        self.cuts.remove(cut)
        return self

    def clear(self) -> Self:
        self.cuts.clear()
        return self

    def __len__(self) -> int:
        return len(self.cuts)

    def __iter__(self) -> Iterator[Cut[T, A]]:
        return iter(self.cuts)

    @property
    def start(self) -> T | None:
        if not self.cuts:
            return None
        return self.cuts[0].start_t

    @property
    def stop(self) -> T | None:
        if not self.cuts:
            return None
        return max(c.stop_t for c in self.cuts)

    @property
    def duration(self) -> T | None:
        if not self.cuts:
            return None
        return self.stop - self.start

    def cuts_at(self, t: T) -> list[Cut[T, A]]:
        """All cuts covering *t*, in start order."""
        right = bisect.bisect_right(self.cuts, t, key=lambda c: c.start_t)
        return [c for c in self.cuts[:right] if c.covers(t)]

    def active(self, t: T) -> Cut[T, A] | None:
        """The cut that wins at *t*, or None if no cut covers it."""
        right = bisect.bisect_right(self.cuts, t, key=lambda c: c.start_t)
        winner = None
        shadowed = 0
        for i in range(right - 1, -1, -1):
            c = self.cuts[i]
            if not c.covers(t):
                continue
            if winner is None:
                winner = c
            else:
                shadowed += 1
        if shadowed:
            log.debug(
                "Track %r: %d overlapping cut(s) at %r, using cut starting at %r",
                self.name, shadowed, t, winner.start_t,
            )
        return winner

    def sample(self, t: T) -> A | None:
        # A winning cut whose behavior is undefined at t does not fall back
        # to the cuts it shadows.
        winner = self.active(t)
        if winner is None:
            return None
        return winner.sample(t)
