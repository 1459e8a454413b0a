"""Factory helpers for constructing color-cycle components."""

from __future__ import annotations

from typing import Callable, TextIO

from controller.color_cycle_controller import ColorCycleController
from renderer.text_renderer import TextRenderer
from scene.scene_loader import HeadlessSceneLoader
from shared.cycle_config import CycleConfig
from shared.interfaces import IRenderer, ISceneLoader


class ColorCycleFactory:
    """Centralised factory for assembling ColorCycleController instances."""

    def __init__(self, text_stream: TextIO | None = None):
        self._text_stream = text_stream

    def create_controller(
        self,
        config: CycleConfig,
        *,
        headless: bool = False,
        max_ticks: int | None = None,
        tick_interval: float = ColorCycleController.DEFAULT_TICK_INTERVAL,
        scripted_inputs: dict[int, list[tuple[str, str]]] | None = None,
        scene_dir: str | None = None,
        load_delay_ticks: int = 1,
        status_reporter: Callable[[str], None] | None = None,
    ) -> ColorCycleController:
        """Create a fully-wired ColorCycleController with a loader and renderer."""
        renderer: IRenderer
        loader: ISceneLoader

        if headless:
            renderer = TextRenderer(stream=self._text_stream)
            loader = HeadlessSceneLoader(
                base_dir=scene_dir, load_delay_ticks=load_delay_ticks
            )
        else:
            # Imported lazily so headless runs never open a window
            from renderer.panda_renderer import PandaRenderer
            from renderer.panda3d.scene_loader import PandaSceneLoader

            buttons = sorted({button for button, _ in config.bindings})
            renderer = PandaRenderer(buttons=buttons)
            loader = PandaSceneLoader(renderer)

        return ColorCycleController(
            config,
            loader,
            renderer_or_factory=renderer,
            status_reporter=status_reporter,
            tick_interval=tick_interval,
            max_ticks=max_ticks,
            scripted_inputs=scripted_inputs,
        )
