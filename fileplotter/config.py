from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
import tomllib
from typing import Any

from fileplotter.axis import Margins
from fileplotter.errors import FileAccessError
from fileplotter.points import BLACK, RGB, WHITE
from fileplotter.records import ParserConfig


DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 600
DEFAULT_WINDOW_TITLE = "Plotter"


@dataclass(frozen=True)
class WindowConfig:
    width: int = DEFAULT_WINDOW_WIDTH
    height: int = DEFAULT_WINDOW_HEIGHT
    title: str = DEFAULT_WINDOW_TITLE
    background: RGB = WHITE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("window width/height must be > 0")


@dataclass(frozen=True)
class PlotterConfig:
    parser: ParserConfig = field(default_factory=ParserConfig)
    margins: Margins = field(default_factory=Margins)
    axis_color: RGB = BLACK
    window: WindowConfig = field(default_factory=WindowConfig)


def load_config(path: str | Path | None) -> PlotterConfig:
    """Read an optional TOML config file; ``None`` yields the defaults.

    Example::

        [parser]
        default_color = [0, 0, 255]
        default_size = 9
        format = "(%x, %y)"

        [axis]
        color = [40, 40, 40]
        margins = { left = 40, bottom = 30 }

        [window]
        width = 1200
        height = 800
        title = "Survey points"
        background = [250, 250, 250]
    """
    if path is None:
        return PlotterConfig()
    config_path = Path(path)
    try:
        with config_path.open("rb") as f:
            raw = tomllib.load(f)
    except OSError as exc:
        raise FileAccessError(str(config_path), exc.strerror or str(exc)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {config_path}: {exc}") from exc
    return config_from_mapping(raw)


def config_from_mapping(raw: dict[str, Any]) -> PlotterConfig:
    parser_raw = _section(raw, "parser")
    axis_raw = _section(raw, "axis")
    window_raw = _section(raw, "window")

    defaults = ParserConfig()
    parser = ParserConfig(
        default_color=_coerce_rgb(parser_raw.get("default_color", defaults.default_color), "parser.default_color"),
        default_size=_coerce_int(parser_raw.get("default_size", defaults.default_size), "parser.default_size"),
        record_pattern=_coerce_optional_str(parser_raw.get("format"), "parser.format"),
    )

    margins_raw = axis_raw.get("margins", {})
    if not isinstance(margins_raw, dict):
        raise ValueError("axis.margins must be a table")
    unknown = set(margins_raw) - {"left", "right", "top", "bottom"}
    if unknown:
        raise ValueError(f"axis.margins has unknown keys: {sorted(unknown)}")
    margins = Margins(**{k: _coerce_int(v, f"axis.margins.{k}") for k, v in margins_raw.items()})

    window = WindowConfig(
        width=_coerce_int(window_raw.get("width", DEFAULT_WINDOW_WIDTH), "window.width"),
        height=_coerce_int(window_raw.get("height", DEFAULT_WINDOW_HEIGHT), "window.height"),
        title=str(window_raw.get("title", DEFAULT_WINDOW_TITLE)),
        background=_coerce_rgb(window_raw.get("background", WHITE), "window.background"),
    )
    return PlotterConfig(
        parser=parser,
        margins=margins,
        axis_color=_coerce_rgb(axis_raw.get("color", BLACK), "axis.color"),
        window=window,
    )


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if not isinstance(value, dict):
        raise ValueError(f"[{name}] must be a table")
    return value


def _coerce_int(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer")
    return value


def _coerce_rgb(value: object, field_name: str) -> RGB:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"{field_name} must be a list of three integers")
    r, g, b = (_coerce_int(c, field_name) for c in value)
    return (r, g, b)


def _coerce_optional_str(value: object, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string if provided")
    return value
