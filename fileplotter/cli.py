from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys
from typing import Sequence

from fileplotter.config import load_config
from fileplotter.errors import ArgumentError, PlotterError
from fileplotter.loader import load_scene
from fileplotter.logging_config import setup_logging
from fileplotter.scene import render_scene

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fileplotter", description="Plot x/y pairs from a text file.")
    parser.add_argument("file", nargs="?", type=Path, help="Input file of whitespace separated x y pairs.")
    parser.add_argument("--config", type=Path, default=None, help="Optional TOML config file.")
    parser.add_argument(
        "--render",
        choices=["window", "headless"],
        default="window",
        help="Open a desktop window, or paint once off-screen and print a summary.",
    )
    parser.add_argument("--width", type=int, default=None, help="Window/surface width. Default: config or 1000.")
    parser.add_argument("--height", type=int, default=None, help="Window/surface height. Default: config or 600.")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        return run(args)
    except ArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except PlotterError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


def run(args: argparse.Namespace) -> int:
    if args.file is None:
        raise ArgumentError("Expected filename in arguments")
    try:
        config = load_config(args.config)
        window = replace(
            config.window,
            width=args.width if args.width is not None else config.window.width,
            height=args.height if args.height is not None else config.window.height,
        )
    except ValueError as exc:
        raise ArgumentError(str(exc)) from exc

    scene = load_scene(args.file, config)

    if args.render == "headless":
        render_scene(scene, window.width, window.height, background=window.background)
        axis = scene.axis
        print(
            f"points={len(scene.points)} x_max={axis.x_max} y_max={axis.y_max} "
            f"x_scale={axis.x_scale} y_scale={axis.y_scale}"
        )
        return EXIT_OK

    from fileplotter.window import PlotWindow

    LOGGER.info("opening %dx%d window for %d point(s)", window.width, window.height, len(scene.points))
    PlotWindow(scene, window).run()
    return EXIT_OK
