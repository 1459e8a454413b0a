"""Tests for ColorCycleController wiring and the frame loop."""

import io
import json
from unittest.mock import Mock

import pytest

from controller.color_cycle_controller import ColorCycleController
from controller.cycle_loop import CycleLoop
from factory import ColorCycleFactory
from renderer.text_renderer import TextRenderer
from scene.scene_loader import HeadlessSceneLoader
from shared.cycle_config import CycleConfig, parse_cycle_spec
from shared.interfaces import IRenderer
from shared.palette import BLACK, BLUE, FALLBACK_COLOR, GREEN, RED, WHITE

STEP = 0.125


class MockRenderer(IRenderer):
    """Mock renderer for testing."""

    def __init__(self, attach_result=False):
        self.run_called = False
        self.attach_update_loop_calls = []
        self.attach_update_loop_return = attach_result
        self.report_status_calls = []
        self.input_callback = None

    def run(self):
        self.run_called = True

    def attach_update_loop(self, update_fn, interval):
        self.attach_update_loop_calls.append({"update_fn": update_fn, "interval": interval})
        return self.attach_update_loop_return

    def report_status(self, message):
        self.report_status_calls.append(message)

    def set_input_callback(self, callback):
        self.input_callback = callback


def cube_mesh(controller):
    return controller.load_request.root.find("Cube.mesh")


def make_controller(config, **kwargs):
    loader = kwargs.pop("loader", None) or HeadlessSceneLoader()
    return ColorCycleController(config, loader, **kwargs)


class TestReadinessWiring:
    """The controller defers all recoloring until the scene load completes."""

    def test_not_ready_before_first_update(self):
        controller = make_controller(CycleConfig.continuous(interval=STEP))

        assert not controller.is_ready()
        assert controller.load_request.root.children() == []

    def test_click_before_load_is_no_op(self):
        controller = make_controller(CycleConfig.click())

        assert controller.handle_input("mouse1", "released") == "apply_once"
        assert controller.palette_index.index == 0

        controller.update(STEP)
        assert controller.is_ready()
        assert cube_mesh(controller).color.history == []

    def test_continuous_starts_after_load(self):
        loader = HeadlessSceneLoader(load_delay_ticks=3)
        controller = make_controller(CycleConfig.continuous(interval=STEP), loader=loader)

        changed = [controller.update(STEP) for _ in range(5)]

        # Load completes in the third update; recoloring starts in the same tick
        assert changed == [0, 0, 1, 1, 1]
        assert cube_mesh(controller).color.history == [WHITE.rgba, RED.rgba, GREEN.rgba]

    def test_unrelated_load_event_ignored(self):
        loader = HeadlessSceneLoader(load_delay_ticks=5)
        controller = make_controller(CycleConfig.click(), loader=loader)

        controller.on_scene_loaded("someone-else")

        assert not controller.is_ready()


class TestModes:
    """Driver wiring per mode."""

    def test_click_mode(self):
        controller = make_controller(CycleConfig.click())
        controller.update(STEP)

        for _ in range(3):
            controller.handle_input("mouse1", "released")

        assert controller.continuous is None
        assert controller.countdown is None
        assert cube_mesh(controller).color.history == [BLACK.rgba, WHITE.rgba, RED.rgba]

    def test_press_edge_does_not_click(self):
        controller = make_controller(CycleConfig.click())
        controller.update(STEP)

        controller.handle_input("mouse1", "pressed")
        controller.handle_input("mouse1", "held")

        assert cube_mesh(controller).color.history == []

    def test_countdown_mode_full_sweep(self):
        controller = make_controller(CycleConfig.countdown(interval=STEP))
        controller.update(STEP)

        assert controller.handle_input("space", "pressed") == "start_countdown"
        for _ in range(8):
            controller.update(STEP)

        assert cube_mesh(controller).color.history == [
            BLACK.rgba, WHITE.rgba, RED.rgba, GREEN.rgba, BLUE.rgba, FALLBACK_COLOR.rgba,
        ]
        assert not controller.countdown.is_active()

    def test_countdown_ignores_held_and_repeated_starts(self):
        controller = make_controller(CycleConfig.countdown(interval=STEP))
        controller.update(STEP)

        controller.handle_input("space", "pressed")
        controller.update(STEP)
        controller.handle_input("space", "held")
        controller.handle_input("mouse3", "pressed")
        for _ in range(10):
            controller.update(STEP)

        assert len(cube_mesh(controller).color.history) == 6
        assert controller.countdown.runs_completed == 1

    def test_combined_mode_shares_palette(self):
        controller = make_controller(CycleConfig.combined(interval=STEP))
        controller.update(STEP)

        controller.handle_input("mouse1", "released")
        controller.handle_input("mouse1", "released")
        assert controller.palette_index.index == 2

        controller.start_countdown()
        controller.update(STEP)

        assert cube_mesh(controller).color.history == [BLACK.rgba, WHITE.rgba, RED.rgba]

    def test_apply_once_without_click_driver(self):
        controller = make_controller(CycleConfig.continuous())

        assert controller.apply_once() == 0
        assert not controller.start_countdown()

    def test_structural_id_target(self, tmp_path):
        scene = {
            "name": "Monitor",
            "children": [
                {"name": "Frame", "material": True},
                {"name": "Screen", "material": True},
            ],
        }
        path = tmp_path / "monitor.json"
        path.write_text(json.dumps(scene))
        config = parse_cycle_spec("continuous:interval=0.125,id=2", model_path=str(path))
        controller = make_controller(config)

        controller.update(STEP)
        monitor = controller.load_request.root.children()[0]

        assert monitor.find("Screen").color.history == [WHITE.rgba]
        assert monitor.find("Frame").color.history == []


class TestRendererWiring:
    """Renderer and status reporting."""

    def test_renderer_receives_input_callback(self):
        renderer = MockRenderer()
        controller = make_controller(CycleConfig.click(), renderer_or_factory=renderer)

        assert renderer.input_callback == controller.handle_input

    def test_renderer_factory(self):
        renderer = TextRenderer(stream=io.StringIO())
        calls = []

        def factory(controller):
            calls.append(controller)
            return renderer

        controller = make_controller(CycleConfig.click(), renderer_or_factory=factory)

        assert calls == [controller]
        assert controller.renderer is renderer

    def test_invalid_renderer_rejected(self):
        with pytest.raises(TypeError):
            make_controller(CycleConfig.click(), renderer_or_factory=42)

    def test_status_reported_to_renderer(self):
        stream = io.StringIO()
        controller = make_controller(
            CycleConfig.countdown(interval=STEP),
            renderer_or_factory=TextRenderer(stream=stream),
        )
        controller.update(STEP)
        controller.start_countdown()
        for _ in range(6):
            controller.update(STEP)

        lines = stream.getvalue().splitlines()
        assert lines == [
            "Scene 'color_change_cube' loaded.",
            "Countdown started (6 steps).",
            "Countdown finished.",
        ]

    def test_status_reporter_without_renderer(self):
        messages = []
        controller = make_controller(CycleConfig.click(), status_reporter=messages.append)
        controller.update(STEP)
        controller.apply_once()

        assert messages == ["Scene 'color_change_cube' loaded.", "Applied Black to 1 node(s)."]

    def test_text_renderer_input_reaches_controller(self):
        renderer = TextRenderer(stream=io.StringIO())
        controller = make_controller(CycleConfig.click(), renderer_or_factory=renderer)
        controller.update(STEP)

        assert renderer.send_input("mouse1", "released") == "apply_once"
        assert cube_mesh(controller).color.history == [BLACK.rgba]


class TestCycleLoop:
    """Headless and renderer-driven loop behavior."""

    def test_headless_run_with_scripted_press(self):
        controller = make_controller(
            CycleConfig.countdown(interval=STEP),
            tick_interval=STEP,
            max_ticks=20,
            scripted_inputs={3: [("space", "pressed"), ("space", "released")]},
        )

        controller.run()

        assert controller.ticks == 20
        assert len(cube_mesh(controller).color.history) == 6

    def test_headless_loop_requires_max_ticks(self):
        controller = make_controller(CycleConfig.click())

        with pytest.raises(ValueError):
            controller.run()

    def test_renderer_loop_attached(self):
        renderer = MockRenderer(attach_result=True)
        loop = CycleLoop(Mock(), renderer, tick_interval=STEP)

        loop.run()

        assert len(renderer.attach_update_loop_calls) == 1
        assert renderer.attach_update_loop_calls[0]["interval"] == STEP
        assert renderer.run_called

    def test_falls_back_to_fixed_step(self):
        controller = Mock()
        renderer = TextRenderer(stream=io.StringIO())
        loop = CycleLoop(controller, renderer, tick_interval=STEP, max_ticks=4)

        loop.run()

        assert controller.update.call_count == 4
        controller.update.assert_called_with(STEP)

    def test_factory_headless(self):
        stream = io.StringIO()
        controller = ColorCycleFactory(text_stream=stream).create_controller(
            CycleConfig.continuous(interval=STEP),
            headless=True,
            max_ticks=6,
            tick_interval=STEP,
        )

        controller.run()

        assert isinstance(controller.renderer, TextRenderer)
        assert cube_mesh(controller).color.history == [
            WHITE.rgba, RED.rgba, GREEN.rgba, BLUE.rgba, FALLBACK_COLOR.rgba, BLACK.rgba,
        ]
        assert "loaded" in stream.getvalue()
