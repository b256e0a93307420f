"""Timelines: parallel tracks sampled side by side."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Self

from .behavior import A, T
from .track import Track


@dataclass
class Timeline(Generic[T, A]):
    """An ordered collection of tracks.

    ``sample`` returns one value per track, in track order. Merging lanes
    into a single value is left to the caller (see ``reel.compose``).
    """

    tracks: list[Track[T, A]] = field(default_factory=list)

    def add_track(self, track: Track[T, A]) -> Self:
        self.tracks.append(track)
        return self

    def track(self, name: str = "") -> Track[T, A]:
        """Append a new empty track and return it."""
        new = Track(name=name)
        self.tracks.append(new)
        return new

    def remove_track(self, track: Track[T, A]) -> Self:
        self.tracks.remove(track)
        return self

    def clear(self) -> Self:
        self.tracks.clear()
        return self

    def __len__(self) -> int:
        return len(self.tracks)

    @property
    def start(self) -> T | None:
        starts = [tr.start for tr in self.tracks if tr.cuts]
        if not starts:
            return None
        return min(starts)

    @property
    def stop(self) -> T | None:
        stops = [tr.stop for tr in self.tracks if tr.cuts]
        if not stops:
            return None
        return max(stops)

    @property
    def duration(self) -> T | None:
        start = self.start
        if start is None:
            return None
        return self.stop - start

    def sample(self, t: T) -> list[A | None]:
        return [tr.sample(t) for tr in self.tracks]
