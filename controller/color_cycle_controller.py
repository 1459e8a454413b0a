"""Color-cycle controller.

Owns the readiness gate, palette index and drivers, and threads them through
one explicit ``update(dt)`` call per frame.
"""

from __future__ import annotations

import logging
from typing import Callable, Hashable, Sequence

from controller.cycle_drivers import (
    CycleTarget,
    ClickCycleDriver,
    ContinuousCycleDriver,
    CountdownCycleDriver,
)
from controller.cycle_loop import CycleLoop
from controller.input_router import InputRouter
from controller.palette_index import PaletteIndex
from controller.readiness_gate import ReadinessGate
from controller.tree_selector import (
    NodePredicate,
    TreeSelector,
    has_color_attribute,
    has_marker,
    structural_id_equals,
)
from shared.constants import (
    ACTION_APPLY_ONCE,
    ACTION_START_COUNTDOWN,
    PRIMARY_TARGET,
)
from shared.cycle_config import CycleConfig
from shared.interfaces import IRenderer, IRendererFactory, ISceneLoader
from shared.palette import DEFAULT_PALETTE, PaletteColor

logger = logging.getLogger(__name__)


def predicate_for(config: CycleConfig) -> NodePredicate:
    """Build the node-selection predicate described by ``config``."""
    if config.target == "id":
        return structural_id_equals(config.target_id)
    if config.target == "marker":
        return has_marker(config.target_marker)
    return has_color_attribute


class ColorCycleController:
    # Fixed frame step for the headless loop (60 fps)
    DEFAULT_TICK_INTERVAL = 1.0 / 60.0

    def __init__(
        self,
        config: CycleConfig,
        loader: ISceneLoader,
        renderer_or_factory: IRenderer | IRendererFactory | None = None,
        palette: Sequence[PaletteColor] = DEFAULT_PALETTE,
        status_reporter: Callable[[str], None] | None = None,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        max_ticks: int | None = None,
        scripted_inputs: dict[int, list[tuple[str, str]]] | None = None,
    ):
        self.config = config
        self.loader = loader
        self._status_reporter = status_reporter
        self.ticks = 0

        self.gate = ReadinessGate()
        self.palette_index = PaletteIndex(palette)
        self.selector = TreeSelector()

        path, sub_resource = config.scene_path
        self.load_request = loader.load(path, sub_resource)
        self.gate.track(PRIMARY_TARGET, self.load_request.load_id)
        loader.add_listener(self.on_scene_loaded)

        self.target = CycleTarget(
            name=PRIMARY_TARGET,
            root=self.load_request.root,
            predicate=predicate_for(config),
        )

        self.continuous: ContinuousCycleDriver | None = None
        self.countdown: CountdownCycleDriver | None = None
        self.click: ClickCycleDriver | None = None
        self._build_drivers()

        self.input_router = InputRouter(config.bindings)
        self.input_router.on(ACTION_APPLY_ONCE, self.apply_once)
        self.input_router.on(ACTION_START_COUNTDOWN, self.start_countdown)

        # Renderer state tracking
        self.renderer = None
        if isinstance(renderer_or_factory, IRenderer):
            self.renderer = renderer_or_factory
        elif isinstance(renderer_or_factory, IRendererFactory):
            self.renderer = renderer_or_factory(self)
        elif renderer_or_factory is None:
            pass
        else:
            raise TypeError(
                "renderer_or_factory must be an IRenderer, IRendererFactory, or None"
            )

        if self.renderer is not None:
            self.renderer.set_input_callback(self.handle_input)

        self._loop = CycleLoop(
            self,
            self.renderer,
            tick_interval=tick_interval,
            max_ticks=max_ticks,
            scripted_inputs=scripted_inputs,
        )

    def _build_drivers(self) -> None:
        config = self.config
        if config.mode == "continuous":
            self.continuous = ContinuousCycleDriver(
                self.gate, self.target, self.palette_index, config.interval, self.selector
            )
        if config.uses_countdown:
            self.countdown = CountdownCycleDriver(
                self.gate,
                self.target,
                self.palette_index,
                config.interval,
                total_steps=config.total_steps,
                selector=self.selector,
            )
        if config.uses_click:
            self.click = ClickCycleDriver(
                self.gate, self.target, self.palette_index, self.selector
            )

    def run(self) -> None:
        self._loop.run()

    def is_ready(self) -> bool:
        return self.gate.is_ready(PRIMARY_TARGET)

    def on_scene_loaded(self, load_id: Hashable) -> None:
        """Listener for loader completion events."""
        for target in self.gate.on_load_event(load_id):
            self._report(f"Scene '{target}' loaded.")

    def handle_input(self, button: str, edge: str) -> str | None:
        """Forward an input edge to the bound action."""
        return self.input_router.dispatch(button, edge)

    def apply_once(self) -> int:
        if self.click is None:
            return 0
        color = self.palette_index.current()
        changed = self.click.trigger()
        if changed:
            self._report(f"Applied {color.name} to {changed} node(s).")
        return changed

    def start_countdown(self) -> bool:
        if self.countdown is None:
            return False
        started = self.countdown.start()
        if started:
            self._report(f"Countdown started ({self.countdown.total_steps} steps).")
        return started

    def update(self, dt: float) -> int:
        """Advance one frame.

        Loader events are delivered first so readiness is settled before any
        driver touches the tree.

        Returns:
            Number of nodes recolored during this frame
        """
        self.ticks += 1
        self.loader.update()

        changed = 0
        if self.continuous is not None:
            changed += self.continuous.update(dt)
        if self.countdown is not None:
            was_active = self.countdown.is_active()
            step_changed = self.countdown.update(dt)
            changed += step_changed
            if was_active and not self.countdown.is_active():
                self._report("Countdown finished.")

        if changed:
            logger.debug(
                "Tick %d: %d node(s) recolored, palette index %d",
                self.ticks,
                changed,
                self.palette_index.index,
            )
        return changed

    def _report(self, message: str) -> None:
        logger.info(message)
        if self.renderer is not None:
            self.renderer.report_status(message)
        elif self._status_reporter is not None:
            self._status_reporter(message)
