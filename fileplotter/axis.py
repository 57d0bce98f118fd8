from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import TYPE_CHECKING, Iterable, Sequence

from fileplotter.points import BLACK, DEFAULT_Z_INDEX, RGB, PlotPoint

if TYPE_CHECKING:
    from fileplotter.surface import RenderSurface


MAX_TICKS = 20
TICK_LENGTH = 5
Y_LABEL_OFFSET = (10, 3)
X_LABEL_OFFSET = (-3, 15)


@dataclass(frozen=True)
class Margins:
    left: int = 20
    right: int = 20
    top: int = 30
    bottom: int = 20

    def __post_init__(self) -> None:
        if min(self.left, self.right, self.top, self.bottom) < 0:
            raise ValueError("margins must be >= 0")


@dataclass(frozen=True)
class PlotRect:
    x: int
    y: int
    width: int
    height: int


@dataclass(frozen=True)
class AxisTick:
    value: int
    position: float


def axis_bound(values: Iterable[float]) -> int:
    """Ceiling of the largest value, never below 1."""
    return int(math.ceil(max([1.0, *values])))


def tick_scale(bound: int) -> int:
    return max(1, bound // MAX_TICKS)


@dataclass(frozen=True)
class AxisModel:
    x_max: int = 1
    y_max: int = 1
    x_scale: int = 1
    y_scale: int = 1
    margins: Margins = field(default_factory=Margins)
    color: RGB = BLACK
    z_index: int = DEFAULT_Z_INDEX
    line_width: int = 2

    def __post_init__(self) -> None:
        if self.x_max < 1 or self.y_max < 1:
            raise ValueError("x_max/y_max must be >= 1")
        if self.x_scale < 1 or self.y_scale < 1:
            raise ValueError("x_scale/y_scale must be >= 1")

    @classmethod
    def from_points(
        cls,
        points: Sequence[PlotPoint],
        *,
        margins: Margins | None = None,
        color: RGB = BLACK,
        z_index: int = DEFAULT_Z_INDEX,
    ) -> "AxisModel":
        x_max = axis_bound(p.x for p in points)
        y_max = axis_bound(p.y for p in points)
        return cls(
            x_max=x_max,
            y_max=y_max,
            x_scale=tick_scale(x_max),
            y_scale=tick_scale(y_max),
            margins=margins or Margins(),
            color=color,
            z_index=z_index,
        )

    def plot_rect(self, width: int, height: int) -> PlotRect:
        m = self.margins
        return PlotRect(
            x=m.left,
            y=m.top,
            width=max(0, width - m.left - m.right),
            height=max(0, height - m.top - m.bottom),
        )

    def to_pixel(self, x: float, y: float, rect: PlotRect) -> tuple[float, float]:
        """Map data coordinates into ``rect``; data-up is screen-up.

        Coordinates far outside the axis may map to non-finite pixels.
        """
        px = x / self.x_max * rect.width + rect.x
        py = rect.y + (self.y_max - y) / self.y_max * rect.height
        return (px, py)

    def x_ticks(self, rect: PlotRect) -> list[AxisTick]:
        ticks: list[AxisTick] = []
        for offset in range(0, self.x_max, self.x_scale):
            value = self.x_max - offset
            px, _ = self.to_pixel(value, 0, rect)
            ticks.append(AxisTick(value=value, position=px))
        return ticks

    def y_ticks(self, rect: PlotRect) -> list[AxisTick]:
        ticks: list[AxisTick] = []
        for offset in range(0, self.y_max, self.y_scale):
            value = self.y_max - offset
            _, py = self.to_pixel(0, value, rect)
            ticks.append(AxisTick(value=value, position=py))
        return ticks

    def draw(self, surface: "RenderSurface", rect: PlotRect) -> None:
        left = rect.x
        top = rect.y
        right = rect.x + rect.width
        bottom = rect.y + rect.height
        surface.draw_line((left, top), (left, bottom), self.color, self.line_width)
        surface.draw_line((left, bottom), (right, bottom), self.color, self.line_width)

        for tick in self.y_ticks(rect):
            surface.draw_line((left, tick.position), (left + TICK_LENGTH, tick.position), self.color, self.line_width)
            label_pos = (left + Y_LABEL_OFFSET[0], tick.position + Y_LABEL_OFFSET[1])
            surface.draw_text(label_pos, str(tick.value), self.color)
        for tick in self.x_ticks(rect):
            surface.draw_line((tick.position, bottom), (tick.position, bottom - TICK_LENGTH), self.color, self.line_width)
            label_pos = (tick.position + X_LABEL_OFFSET[0], bottom + X_LABEL_OFFSET[1])
            surface.draw_text(label_pos, str(tick.value), self.color)
