"""Main entry point for the albedo color-cycle demo."""

import argparse
import logging
import sys

from factory import ColorCycleFactory
from scene.scene_loader import SceneLoadError
from shared.constants import EDGE_PRESSED, EDGE_RELEASED
from shared.cycle_config import parse_cycle_spec


def parse_press_spec(spec: str, default_button: str) -> tuple[int, str]:
    """Parse a scripted press 'TICK[:BUTTON]' into (tick, button)."""
    tick_str, _, button = spec.partition(":")
    try:
        tick = int(tick_str)
    except ValueError:
        raise ValueError(f"Invalid press tick: {tick_str}") from None
    if tick < 0:
        raise ValueError(f"Press tick must be non-negative, got {tick}")
    return tick, (button.strip() or default_button)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Albedo color-cycle demo",
        epilog="""
Cycle Configuration:
  Use --mode to choose the drivers with the format:
    MODE[:PARAM=VALUE,PARAM=VALUE,...]

  Modes:
    click           - Left-button release recolors once (default)
    continuous      - Repeating timer recolors forever
    countdown       - Space / right button runs one bounded sweep
    combined        - click and countdown together

  Parameters (examples):
    interval=X      - Timer interval in seconds
    steps=N         - Countdown length (default: palette size + 1)
    id=N            - Only recolor the node with structural id N
    marker=NAME     - Only recolor nodes tagged NAME

  Examples:
    --mode continuous:interval=0.25
    --mode countdown:interval=0.125
    --mode continuous:interval=1.0,id=60
    --headless --mode countdown --press 5 --ticks 120
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--mode",
        type=str,
        default="click",
        metavar="SPEC",
        help="Cycle configuration (default: click). See --help for format."
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        metavar="PATH[#SCENE]",
        help="Scene file to load (default: cube.glb#Scene0)",
    )
    parser.add_argument(
        "--headless", action="store_true", help="Run without 3D renderer"
    )
    parser.add_argument(
        "--scene-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="Directory relative scene paths are resolved against (headless only)",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=600,
        help="Number of frames to simulate in headless mode (default: 600)",
    )
    parser.add_argument(
        "--tick-interval",
        type=float,
        default=1.0 / 60.0,
        help="Seconds per simulated frame in headless mode (default: 1/60)",
    )
    parser.add_argument(
        "--press",
        action="append",
        default=[],
        metavar="TICK[:BUTTON]",
        help="Press and release BUTTON at frame TICK (repeatable)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = parse_cycle_spec(args.mode, model_path=args.model)
        default_button = "mouse1" if config.uses_click else "space"
        scripted_inputs: dict[int, list[tuple[str, str]]] = {}
        for spec in args.press:
            tick, button = parse_press_spec(spec, default_button)
            scripted_inputs.setdefault(tick, []).extend(
                [(button, EDGE_PRESSED), (button, EDGE_RELEASED)]
            )
    except ValueError as e:
        parser.error(f"Invalid configuration: {e}")
        return

    if args.ticks < 1:
        parser.error("--ticks must be at least 1")

    factory = ColorCycleFactory()
    try:
        controller = factory.create_controller(
            config,
            headless=args.headless,
            max_ticks=args.ticks if args.headless else None,
            tick_interval=args.tick_interval,
            scripted_inputs=scripted_inputs,
            scene_dir=args.scene_dir,
        )
    except SceneLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    controller.run()


if __name__ == "__main__":
    main()
