"""Frame-stepped timer used by the cycle drivers."""

from __future__ import annotations

from typing import Literal

TimerMode = Literal["once", "repeating"]


class CycleTimer:
    """Elapsed-vs-duration timer advanced by an external clock delta.

    A one-shot timer finishes once and stays finished until ``reset()``.
    A repeating timer re-arms itself, carrying the overshoot into the next
    interval; several completions within one tick count as one.
    ``just_finished`` is only true for the tick in which the
    timer completed.
    """

    def __init__(self, duration: float, mode: TimerMode = "once"):
        if duration < 0:
            raise ValueError(f"Timer duration must be non-negative, got {duration}")
        self.duration = duration
        self.mode = mode
        self.elapsed = 0.0
        self.finished = False
        self.just_finished = False

    @property
    def repeating(self) -> bool:
        return self.mode == "repeating"

    def tick(self, dt: float) -> CycleTimer:
        """Advance the timer by ``dt`` seconds."""
        self.just_finished = False

        if self.finished and not self.repeating:
            return self

        self.elapsed += max(dt, 0.0)
        if self.elapsed < self.duration:
            self.finished = False
            return self

        if not self.repeating:
            self.elapsed = self.duration
            self.finished = True
            self.just_finished = True
            return self

        if self.duration > 0:
            self.elapsed %= self.duration
        else:
            self.elapsed = 0.0
        self.finished = True
        self.just_finished = True
        return self

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
        self.just_finished = False
