from __future__ import annotations

from dataclasses import dataclass


RGB = tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)
DEFAULT_POINT_SIZE = 7
DEFAULT_Z_INDEX = 100


@dataclass(frozen=True)
class PlotPoint:
    x: float
    y: float
    color: RGB = BLACK
    size: int = DEFAULT_POINT_SIZE
    z_index: int = DEFAULT_Z_INDEX
