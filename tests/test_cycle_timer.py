"""Tests for the frame-stepped cycle timer."""

import pytest

from controller.cycle_timer import CycleTimer


class TestOneShotTimer:
    """One-shot timers fire once and stay finished until reset."""

    def test_fires_when_duration_reached(self):
        timer = CycleTimer(0.5)

        timer.tick(0.25)
        assert not timer.just_finished
        assert not timer.finished

        timer.tick(0.25)
        assert timer.just_finished
        assert timer.finished

    def test_does_not_fire_again_without_reset(self):
        timer = CycleTimer(0.5)
        timer.tick(0.5)
        timer.tick(0.5)

        assert timer.finished
        assert not timer.just_finished
        assert timer.elapsed == 0.5

    def test_reset_rearms(self):
        timer = CycleTimer(0.5)
        timer.tick(0.5)
        timer.reset()

        assert not timer.finished
        assert timer.elapsed == 0.0
        timer.tick(0.5)
        assert timer.just_finished

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError):
            CycleTimer(-1.0)


class TestRepeatingTimer:
    """Repeating timers re-arm themselves and carry overshoot."""

    def test_fires_every_interval(self):
        timer = CycleTimer(0.25, mode="repeating")
        fired = []
        for _ in range(8):
            timer.tick(0.125)
            fired.append(timer.just_finished)

        assert fired == [False, True] * 4

    def test_overshoot_carries_over(self):
        timer = CycleTimer(0.5, mode="repeating")
        timer.tick(0.75)

        assert timer.just_finished
        assert timer.elapsed == pytest.approx(0.25)

        timer.tick(0.25)
        assert timer.just_finished

    def test_multiple_completions_in_one_tick_fire_once(self):
        timer = CycleTimer(0.25, mode="repeating")
        timer.tick(1.1)

        assert timer.just_finished
        assert timer.elapsed == pytest.approx(0.1)

        timer.tick(0.1)
        assert not timer.just_finished
