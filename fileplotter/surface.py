from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np
from PIL import Image

from fileplotter.points import RGB, WHITE
from fileplotter.raster import RGBA, draw_line, draw_text, fill_circle, new_canvas, text_size


Position = tuple[float, float]


class RenderSurface(ABC):
    """Drawing contract used by the axis and point draw routines."""

    @abstractmethod
    def size(self) -> tuple[int, int]:
        raise NotImplementedError

    @abstractmethod
    def draw_line(self, start: Position, end: Position, color: RGB, width: int = 1) -> None:
        raise NotImplementedError

    @abstractmethod
    def fill_circle(self, center: Position, radius: float, color: RGB) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_text(self, position: Position, text: str, color: RGB) -> None:
        """Draw ``text`` with ``position`` at the left end of its baseline."""
        raise NotImplementedError


class RasterSurface(RenderSurface):
    """Off-screen surface backed by an (H, W, 4) uint8 numpy canvas."""

    def __init__(self, width: int, height: int, background: RGB = WHITE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("surface width/height must be > 0")
        self._width = width
        self._height = height
        self._canvas = new_canvas(width, height, color=to_rgba(background))

    @property
    def rgba(self) -> np.ndarray:
        return self._canvas

    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def draw_line(self, start: Position, end: Position, color: RGB, width: int = 1) -> None:
        x0, y0 = _snap(start)
        x1, y1 = _snap(end)
        draw_line(self._canvas, x0, y0, x1, y1, to_rgba(color), width=width)

    def fill_circle(self, center: Position, radius: float, color: RGB) -> None:
        fill_circle(self._canvas, float(center[0]), float(center[1]), radius, to_rgba(color))

    def draw_text(self, position: Position, text: str, color: RGB) -> None:
        x, baseline = _snap(position)
        _, h = text_size(text)
        draw_text(self._canvas, x, baseline - h, text, to_rgba(color))

    def to_image(self) -> Image.Image:
        return Image.fromarray(self._canvas)


def to_rgba(color: RGB) -> RGBA:
    # channels above 255 are accepted by the parser; clip them here
    r, g, b = (min(255, max(0, int(c))) for c in color)
    return (r, g, b, 255)


def _snap(position: Position) -> tuple[int, int]:
    return (int(round(position[0])), int(round(position[1])))
