from __future__ import annotations

import math

import numpy as np

from fileplotter.raster.canvas import RGBA, fill_mask


def fill_circle(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA) -> None:
    """Fill every pixel whose index lies within ``radius`` of (cx, cy).

    Pixel (i, j) is treated as centered on the integer coordinate, so a
    diameter-7 circle centered on a pixel covers exactly 7 columns. Only the
    part of the bounding box that overlaps ``dst`` is evaluated.
    """
    if radius <= 0 or not all(math.isfinite(v) for v in (cx, cy, radius)):
        return
    h, w = dst.shape[:2]
    # clamp in float space; cx +/- radius may overflow to inf
    x0 = math.floor(max(0.0, cx - radius))
    y0 = math.floor(max(0.0, cy - radius))
    x1 = math.ceil(min(w - 1.0, cx + radius))
    y1 = math.ceil(min(h - 1.0, cy + radius))
    if x0 > x1 or y0 > y1:
        return
    ys, xs = np.ogrid[y0 : y1 + 1, x0 : x1 + 1]
    mask = (xs - cx) ** 2 + (ys - cy) ** 2 <= radius * radius
    fill_mask(dst, x0, y0, mask, color)
