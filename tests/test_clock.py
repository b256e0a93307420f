"""Tests for time generators."""

import logging
from fractions import Fraction

import pytest

from reel import MonotonicTimeGenerator, SimpleTimeGenerator, TimeDirectionError, TimeGenerator


class TestProtocol:
    def test_simple_is_generator(self) -> None:
        assert isinstance(SimpleTimeGenerator(), TimeGenerator)

    def test_monotonic_is_generator(self) -> None:
        assert isinstance(MonotonicTimeGenerator(), TimeGenerator)


class TestSimpleTick:
    def test_tick_sequence(self, generator: SimpleTimeGenerator) -> None:
        times = [generator.tick() for _ in range(4)]
        assert times == pytest.approx([0.0, 0.1, 0.2, 0.3])
        assert generator.current() == pytest.approx(0.4)

    def test_untick_returns_then_regresses(self) -> None:
        gen = SimpleTimeGenerator(1.0, 0.25)
        assert gen.untick() == 1.0
        assert gen.current() == 0.75

    def test_untick_past_reset_value(self) -> None:
        gen = SimpleTimeGenerator(0, 1)
        gen.untick()
        gen.untick()
        assert gen.current() == -2

    @pytest.mark.parametrize("delta", [0.1, 0.016, 1.0 / 3.0])
    def test_tick_untick_round_trip(self, delta) -> None:
        gen = SimpleTimeGenerator(0.0, delta)
        for _ in range(7):
            gen.tick()
        before = gen.current()
        gen.tick()
        gen.untick()
        assert gen.current() == pytest.approx(before)
        gen.untick()
        gen.tick()
        assert gen.current() == pytest.approx(before)

    def test_integer_frames(self) -> None:
        gen = SimpleTimeGenerator(10, 2)
        assert [gen.tick() for _ in range(3)] == [10, 12, 14]

    def test_fraction_time_is_exact(self) -> None:
        gen = SimpleTimeGenerator(Fraction(0), Fraction(1, 3))
        for _ in range(3):
            gen.tick()
        assert gen.current() == 1


class TestSimpleReset:
    def test_reset_after_history(self, generator: SimpleTimeGenerator) -> None:
        generator.tick()
        generator.tick()
        generator.untick()
        generator.set(42.0)
        generator.reset()
        assert generator.current() == 0.0

    def test_reset_keeps_delta(self, generator: SimpleTimeGenerator) -> None:
        generator.change_delta(0.5)
        generator.tick()
        generator.reset()
        assert generator.delta == 0.5
        assert generator.reset_value == 0.0


class TestSimpleSetAndDelta:
    def test_set_forces_current(self, generator: SimpleTimeGenerator) -> None:
        generator.set(3.0)
        assert generator.tick() == 3.0

    def test_change_delta_applies_to_next_step(self, generator: SimpleTimeGenerator) -> None:
        first = generator.tick()
        generator.change_delta(1.0)
        second = generator.tick()
        third = generator.tick()
        assert first == 0.0
        assert second == pytest.approx(0.1)
        assert third == pytest.approx(1.1)

    def test_change_delta_logged(self, generator: SimpleTimeGenerator, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="reel.clock"):
            generator.change_delta(0.5)
        assert "0.5" in caplog.text

    def test_repr(self) -> None:
        assert repr(SimpleTimeGenerator(0, 1)) == "SimpleTimeGenerator(current=0, reset_value=0, delta=1)"


class TestMonotonic:
    def test_ticks_forward(self) -> None:
        gen = MonotonicTimeGenerator(0.0, 0.5)
        assert [gen.tick() for _ in range(3)] == [0.0, 0.5, 1.0]

    def test_untick_rejected(self) -> None:
        gen = MonotonicTimeGenerator(0.0, 0.5)
        gen.tick()
        with pytest.raises(TimeDirectionError):
            gen.untick()
        assert gen.current() == 0.5

    def test_negative_delta_rejected(self) -> None:
        with pytest.raises(TimeDirectionError):
            MonotonicTimeGenerator(0.0, -1.0)
        gen = MonotonicTimeGenerator(0.0, 1.0)
        with pytest.raises(TimeDirectionError):
            gen.change_delta(-0.1)
        assert gen.delta == 1.0

    def test_seek_forward_allowed(self) -> None:
        gen = MonotonicTimeGenerator(0.0, 1.0)
        gen.set(5.0)
        assert gen.current() == 5.0

    def test_seek_backward_rejected(self) -> None:
        gen = MonotonicTimeGenerator(0.0, 1.0)
        gen.set(5.0)
        with pytest.raises(TimeDirectionError):
            gen.set(4.0)

    def test_reset_restarts(self) -> None:
        gen = MonotonicTimeGenerator(1.0, 1.0)
        gen.tick()
        gen.tick()
        gen.reset()
        assert gen.current() == 1.0

    def test_direction_error_is_value_error(self) -> None:
        assert issubclass(TimeDirectionError, ValueError)
