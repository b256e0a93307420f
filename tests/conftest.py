"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from reel import SimpleTimeGenerator, Timeline, Track, from_fn


@dataclass
class StubBehavior:
    """Behavior that reacts ``value * t`` and records every query."""

    value: float
    calls: list[float] = field(default_factory=list)

    def react(self, t: float) -> float:
        self.calls.append(t)
        return self.value * t


@dataclass
class PartialBehavior:
    """Behavior defined only for non-negative times."""

    value: float

    def react(self, t: float) -> float | None:
        if t < 0:
            return None
        return self.value


@pytest.fixture
def double():
    return from_fn(lambda t: t * 2.0)


@pytest.fixture
def stub_behavior() -> StubBehavior:
    return StubBehavior(value=3.0)


@pytest.fixture
def track() -> Track:
    return Track(name="lane")


@pytest.fixture
def timeline() -> Timeline:
    return Timeline()


@pytest.fixture
def generator() -> SimpleTimeGenerator:
    return SimpleTimeGenerator(0.0, 0.1)
