"""Timer- and input-driven drivers of the albedo cycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from controller.cycle_timer import CycleTimer
from controller.palette_index import PaletteIndex
from controller.readiness_gate import ReadinessGate
from controller.tree_selector import NodePredicate, TreeSelector
from shared.interfaces import ISceneNode
from shared.palette import PaletteColor

logger = logging.getLogger(__name__)


@dataclass
class CycleTarget:
    """A scene subtree recolored by a driver.

    Attributes:
        name: Readiness-gate key of the subtree
        root: Root node; its descendants are candidates
        predicate: Which descendants are recolored
    """

    name: str
    root: ISceneNode
    predicate: NodePredicate


class _CycleDriver:
    """Common plumbing: readiness check and color application."""

    def __init__(
        self,
        gate: ReadinessGate,
        target: CycleTarget,
        palette_index: PaletteIndex,
        selector: TreeSelector | None = None,
    ):
        self.gate = gate
        self.target = target
        self.palette_index = palette_index
        self.selector = selector or TreeSelector()
        self.applications = 0

    def is_target_ready(self) -> bool:
        return self.gate.is_ready(self.target.name)

    def _apply(self, color: PaletteColor) -> int:
        changed = self.selector.apply_color(
            self.target.root, self.target.predicate, color
        )
        self.applications += 1
        return changed


class ContinuousCycleDriver(_CycleDriver):
    """Advances the palette and recolors on every repeating-timer completion."""

    def __init__(
        self,
        gate: ReadinessGate,
        target: CycleTarget,
        palette_index: PaletteIndex,
        interval: float,
        selector: TreeSelector | None = None,
    ):
        super().__init__(gate, target, palette_index, selector)
        self.timer = CycleTimer(interval, mode="repeating")

    def update(self, dt: float) -> int:
        """Tick the driver.

        Returns:
            Number of nodes recolored this tick
        """
        if not self.is_target_ready():
            return 0

        self.timer.tick(dt)
        if not self.timer.just_finished:
            return 0

        self.palette_index.advance()
        return self._apply(self.palette_index.current())


class CountdownCycleDriver(_CycleDriver):
    """Runs a fixed number of timed recolor steps after a start signal.

    States are ``Inactive`` and ``Active``. A start signal while active is
    dropped. Each step waits on a one-shot timer, applies the current color,
    advances the palette and re-arms the timer until ``total_steps`` steps
    have run.
    """

    def __init__(
        self,
        gate: ReadinessGate,
        target: CycleTarget,
        palette_index: PaletteIndex,
        interval: float,
        total_steps: int | None = None,
        selector: TreeSelector | None = None,
    ):
        super().__init__(gate, target, palette_index, selector)
        # One step more than the palette so the sweep lands back on index 0.
        # This also renders the sentinel (fallback) frame once per sweep.
        self.total_steps = (
            total_steps if total_steps is not None else palette_index.cycle_length
        )
        self.timer = CycleTimer(interval, mode="once")
        self.active = False
        self.current_step = 0
        self.runs_completed = 0

    def is_active(self) -> bool:
        return self.active

    def start(self) -> bool:
        """Handle a start signal.

        Returns:
            True if a run was started, False if the signal was ignored
        """
        if self.active:
            logger.debug("Countdown already running (step %d/%d); start ignored",
                         self.current_step, self.total_steps)
            return False
        if not self.is_target_ready():
            logger.debug("Countdown start ignored; %s not loaded", self.target.name)
            return False

        self.active = True
        self.current_step = 0
        self.timer.reset()
        return True

    def update(self, dt: float) -> int:
        """Tick the countdown.

        Returns:
            Number of nodes recolored this tick
        """
        if not self.active or not self.is_target_ready():
            return 0

        self.timer.tick(dt)
        if not self.timer.just_finished:
            return 0

        changed = self._apply(self.palette_index.current())
        self.palette_index.advance()
        self.current_step += 1

        if self.current_step >= self.total_steps:
            self.active = False
            self.runs_completed += 1
            logger.debug("Countdown finished after %d steps", self.current_step)
        else:
            self.timer.reset()
        return changed


class ClickCycleDriver(_CycleDriver):
    """Recolors immediately on an input edge, then advances the palette."""

    def trigger(self) -> int:
        """Apply the current color once.

        Returns:
            Number of nodes recolored (0 while the target is not loaded)
        """
        if not self.is_target_ready():
            return 0

        changed = self._apply(self.palette_index.current())
        self.palette_index.advance()
        return changed

    def update(self, dt: float) -> int:
        return 0
