"""Drawable registry and z-order compositing.

A scene holds exactly one axis item followed by one item per point, in file
order. Every paint pass re-sorts the items by z-index with a stable sort, so
items sharing a z-index always draw in creation order and higher z-indices
land on top.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

from fileplotter.axis import AxisModel, PlotRect
from fileplotter.points import WHITE, RGB, PlotPoint
from fileplotter.surface import RasterSurface, RenderSurface

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisItem:
    z_index: int


@dataclass(frozen=True)
class PointItem:
    point: PlotPoint
    z_index: int


DrawableItem = AxisItem | PointItem


@dataclass(frozen=True)
class Scene:
    axis: AxisModel
    items: tuple[DrawableItem, ...]

    def __post_init__(self) -> None:
        axis_items = sum(1 for item in self.items if isinstance(item, AxisItem))
        if axis_items != 1:
            raise ValueError(f"scene must contain exactly one axis item, got {axis_items}")

    @classmethod
    def build(cls, axis: AxisModel, points: Sequence[PlotPoint]) -> "Scene":
        items: list[DrawableItem] = [AxisItem(z_index=axis.z_index)]
        items.extend(PointItem(point=p, z_index=p.z_index) for p in points)
        return cls(axis=axis, items=tuple(items))

    @property
    def points(self) -> tuple[PlotPoint, ...]:
        return tuple(item.point for item in self.items if isinstance(item, PointItem))

    def draw_order(self) -> list[DrawableItem]:
        # sorted() is stable: equal z-indices keep insertion order
        return sorted(self.items, key=_z_index)

    def paint(self, surface: RenderSurface) -> int:
        """Draw every item onto ``surface`` in z-order; returns the item count."""
        width, height = surface.size()
        rect = self.axis.plot_rect(width, height)
        drawn = 0
        for item in self.draw_order():
            draw_item(item, surface, self.axis, rect)
            drawn += 1
        LOGGER.debug("painted %d item(s) into %dx%d surface", drawn, width, height)
        return drawn


def draw_item(item: DrawableItem, surface: RenderSurface, axis: AxisModel, rect: PlotRect) -> None:
    match item:
        case AxisItem():
            axis.draw(surface, rect)
        case PointItem(point=point):
            center = axis.to_pixel(point.x, point.y, rect)
            surface.fill_circle(center, point.size / 2, point.color)
        case _:
            raise TypeError(f"unsupported drawable item: {item!r}")


def render_scene(scene: Scene, width: int, height: int, background: RGB = WHITE) -> RasterSurface:
    surface = RasterSurface(width, height, background=background)
    scene.paint(surface)
    return surface


def _z_index(item: DrawableItem) -> int:
    return item.z_index
