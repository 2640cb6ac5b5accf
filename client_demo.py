#!/usr/bin/env python3
#
# PROJECT: perspective-wireframe
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 13
# LOG_REF: 2026-10-19
#

import curses
import argparse
import logging
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from perspective_wireframe.config import RenderConfig
from perspective_wireframe.demo import main as demo_main, render_snapshot
from perspective_wireframe.logging_config import setup_logging


def build_parser():
    epilog = """\
examples:
  %(prog)s                                     Interactive demo scene
  %(prog)s --camera 40 30 -200 --fov 90        Start from an off-axis camera
  %(prog)s --snapshot --cols 120 --rows 40     Print one frame and exit
  %(prog)s --ascii --no-color                  ASCII density characters, monochrome
  %(prog)s --stroke-color #00FFFF --bg-color #000000

keys:
  arrows  move camera along x / y     w / s  move along z
  [ / ]   narrow / widen fov           q      quit
"""
    parser = argparse.ArgumentParser(
        description="Perspective wireframe cube renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=float, default=1500,
                        help="Viewport width in scene units (default: 1500)")
    parser.add_argument("--height", type=float, default=800,
                        help="Viewport height in scene units (default: 800)")
    parser.add_argument("--point-size", type=float, default=5.0,
                        help="Side of the square drawn at each vertex (default: 5)")
    parser.add_argument("--fov", type=float, default=120.0,
                        help="Field of view in degrees, 0-180 exclusive (default: 120)")
    parser.add_argument("--camera", type=float, nargs=3, default=(0.0, 0.0, -50.0),
                        metavar=("X", "Y", "Z"),
                        help="Camera position (default: 0 0 -50)")
    parser.add_argument("--look-at", type=float, nargs=3, default=(0.0, 0.0, 0.0),
                        metavar=("X", "Y", "Z"),
                        help="Point the camera looks at (default: 0 0 0)")
    parser.add_argument("--step", type=float, default=1.0,
                        help="Camera movement per key press (default: 1)")
    parser.add_argument("--stroke-color", default="#D0DD14",
                        help="Edge color in hex #RRGGBB (default: #D0DD14)")
    parser.add_argument("--fill-color", default="#D0DD14",
                        help="Vertex color in hex #RRGGBB (default: #D0DD14)")
    parser.add_argument("--bg-color", default="#0E0E2C",
                        help="Background color in hex #RRGGBB (default: #0E0E2C)")
    parser.add_argument("--line-width", type=float, default=1.0,
                        help="Edge width in scene units (default: 1)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--snapshot", action="store_true",
                        help="Print a single frame to stdout instead of running interactively")
    parser.add_argument("--cols", type=int, default=100,
                        help="Snapshot width in characters (default: 100)")
    parser.add_argument("--rows", type=int, default=30,
                        help="Snapshot height in characters (default: 30)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None,
                        help="Also write log records to this file")
    return parser


def config_from_args(args, parser):
    """Build a RenderConfig from parsed arguments; invalid values end in parser.error."""
    overrides = dict(
        width=args.width,
        height=args.height,
        point_size=args.point_size,
        fov=args.fov,
        camera_position=tuple(args.camera),
        camera_direction=tuple(args.look_at),
        stroke_colour=args.stroke_color,
        fill_colour=args.fill_color,
        bg_colour=args.bg_color,
        line_width=args.line_width,
        move_step=args.step,
    )
    try:
        config = RenderConfig.detect_terminal(**overrides)
    except ValueError as e:
        parser.error(str(e))
    if args.no_color:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    if args.cols <= 0 or args.rows <= 0:
        parser.error("--cols and --rows must be positive")
    return config


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(args, parser)

    # curses owns the terminal in interactive mode, so log to file only
    setup_logging(getattr(logging, args.log_level), args.log_file,
                  console=args.snapshot, stream=sys.stderr)

    if args.snapshot:
        for line in render_snapshot(config, args.cols, args.rows):
            print(line.rstrip())
        return 0

    curses.wrapper(lambda s: demo_main(s, config))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
