from __future__ import annotations

import logging
from pathlib import Path

from fileplotter.axis import AxisModel
from fileplotter.config import PlotterConfig
from fileplotter.errors import FileAccessError
from fileplotter.records import parse_points
from fileplotter.scene import Scene

LOGGER = logging.getLogger(__name__)


def read_input(path: str | Path) -> str:
    input_path = Path(path)
    try:
        return input_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileAccessError(str(input_path), "file not found") from exc
    except IsADirectoryError as exc:
        raise FileAccessError(str(input_path), "is a directory") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise FileAccessError(str(input_path), str(exc)) from exc


def build_scene(text: str, config: PlotterConfig | None = None) -> Scene:
    config = config or PlotterConfig()
    points = parse_points(text, config.parser)
    axis = AxisModel.from_points(points, margins=config.margins, color=config.axis_color)
    LOGGER.info(
        "axis bounds x_max=%d y_max=%d x_scale=%d y_scale=%d",
        axis.x_max,
        axis.y_max,
        axis.x_scale,
        axis.y_scale,
    )
    return Scene.build(axis, points)


def load_scene(path: str | Path, config: PlotterConfig | None = None) -> Scene:
    """Read and parse ``path`` once; the returned scene is immutable."""
    LOGGER.info("loading %s", path)
    return build_scene(read_input(path), config)
