"""Frame loop orchestration for the color cycle."""

from __future__ import annotations

from shared.interfaces import IRenderer


class CycleLoop:
    """Drives the controller update cycle independent of renderer mode.

    With a renderer that accepts an update loop, frames come from the
    renderer's clock. Otherwise the loop steps the controller with a fixed
    ``tick_interval`` until ``max_ticks`` frames have run.
    """

    def __init__(
        self,
        controller,
        renderer: IRenderer | None,
        tick_interval: float,
        max_ticks: int | None = None,
        scripted_inputs: dict[int, list[tuple[str, str]]] | None = None,
    ) -> None:
        self._controller = controller
        self._renderer = renderer
        self._tick_interval = tick_interval
        self._max_ticks = max_ticks
        self._scripted_inputs = dict(scripted_inputs or {})
        self.ticks = 0

    def run(self) -> None:
        """Run the loop until ``max_ticks`` frames have been processed."""

        if self._renderer:
            try:
                if self._renderer.attach_update_loop(self._tick, self._tick_interval):
                    self._renderer.run()
                    return
            except AttributeError:
                pass

        if self._max_ticks is None:
            raise ValueError("A headless loop requires max_ticks.")

        while not self._tick(self._tick_interval):
            pass

    def _tick(self, dt: float) -> bool:
        for button, edge in self._scripted_inputs.pop(self.ticks, []):
            self._controller.handle_input(button, edge)
        self._controller.update(dt)
        self.ticks += 1
        return self._max_ticks is not None and self.ticks >= self._max_ticks
