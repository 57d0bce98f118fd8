from __future__ import annotations

import numpy as np

from fileplotter.raster.canvas import RGBA, fill_rect


def draw_line(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int = 1) -> None:
    """Draw a segment with a square brush ``width`` pixels wide."""
    if width <= 0:
        return
    lo = -(width // 2)
    hi = lo + width - 1
    if x0 == x1 or y0 == y1:
        fill_rect(dst, min(x0, x1) + lo, min(y0, y1) + lo, max(x0, x1) + hi, max(y0, y1) + hi, color)
        return

    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        fill_rect(dst, x0 + lo, y0 + lo, x0 + hi, y0 + hi, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
