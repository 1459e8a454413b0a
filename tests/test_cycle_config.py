"""Tests for cycle configuration parsing."""

import pytest

from shared.constants import (
    COUNTDOWN_INTERVAL,
    CONTINUOUS_INTERVAL,
    DEFAULT_MODEL_PATH,
    MONITOR_SCREEN_ID,
    SLOW_COUNTDOWN_INTERVAL,
)
from shared.cycle_config import CycleConfig, default_bindings, parse_cycle_spec


class TestCycleConfig:
    """Test suite for CycleConfig and its presets."""

    def test_defaults(self):
        config = CycleConfig()

        assert config.mode == "click"
        assert config.target == "material"
        assert config.total_steps is None
        assert config.model_path == DEFAULT_MODEL_PATH
        assert config.bindings == default_bindings()

    def test_scene_path_splits_sub_resource(self):
        assert CycleConfig(model_path="cube.glb#Scene0").scene_path == ("cube.glb", "Scene0")
        assert CycleConfig(model_path="cube.glb").scene_path == ("cube.glb", None)
        assert CycleConfig(model_path="cube.glb#").scene_path == ("cube.glb", None)

    def test_presets(self):
        assert CycleConfig.continuous().interval == CONTINUOUS_INTERVAL
        assert CycleConfig.countdown().interval == COUNTDOWN_INTERVAL
        assert CycleConfig.combined().interval == SLOW_COUNTDOWN_INTERVAL

        screen = CycleConfig.screen()
        assert screen.target == "id"
        assert screen.target_id == MONITOR_SCREEN_ID
        assert screen.interval == 1.0

    def test_mode_flags(self):
        assert CycleConfig(mode="combined").uses_click
        assert CycleConfig(mode="combined").uses_countdown
        assert not CycleConfig(mode="continuous").uses_click
        assert not CycleConfig(mode="click").uses_countdown

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"mode": "strobe"},
            {"interval": -1.0},
            {"total_steps": 0},
            {"target": "id"},
            {"target": "marker"},
        ],
    )
    def test_invalid_configs(self, kwargs):
        with pytest.raises(ValueError):
            CycleConfig(**kwargs)

    def test_bindings_are_not_shared(self):
        a = CycleConfig()
        b = CycleConfig()
        a.bindings[("x", "pressed")] = "apply_once"

        assert ("x", "pressed") not in b.bindings


class TestParseCycleSpec:
    """Test suite for parse_cycle_spec."""

    def test_mode_only(self):
        config = parse_cycle_spec("countdown")

        assert config.mode == "countdown"
        assert config.interval == COUNTDOWN_INTERVAL

    def test_mode_is_case_insensitive(self):
        assert parse_cycle_spec("Continuous").mode == "continuous"

    def test_parameters(self):
        config = parse_cycle_spec("countdown:interval=0.5,steps=3")

        assert config.interval == 0.5
        assert config.total_steps == 3
        assert config.target == "material"

    def test_id_target(self):
        config = parse_cycle_spec("continuous:interval=1.0,id=64")

        assert config.target == "id"
        assert config.target_id == 64

    def test_marker_target(self):
        config = parse_cycle_spec("click:marker=screen")

        assert config.target == "marker"
        assert config.target_marker == "screen"

    def test_model_path_override(self):
        config = parse_cycle_spec("click", model_path="monitor.glb#Scene1")

        assert config.scene_path == ("monitor.glb", "Scene1")

    @pytest.mark.parametrize(
        "spec",
        [
            "strobe",
            "click:interval",
            "click:speed=2",
            "click:steps=many",
            "click:id=60,marker=screen",
            "click:target=everything",
        ],
    )
    def test_invalid_specs(self, spec):
        with pytest.raises(ValueError):
            parse_cycle_spec(spec)

    def test_empty_parameters_ignored(self):
        config = parse_cycle_spec("continuous:interval=0.25,,")

        assert config.interval == 0.25
