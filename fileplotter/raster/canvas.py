from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Blend ``color`` over the inclusive rectangle, clipped to the canvas."""
    left = max(0, min(x0, x1))
    right = min(dst.shape[1] - 1, max(x0, x1))
    top = max(0, min(y0, y1))
    bottom = min(dst.shape[0] - 1, max(y0, y1))
    if left > right or top > bottom:
        return
    _blend(dst[top : bottom + 1, left : right + 1], color)


def fill_mask(dst: np.ndarray, x0: int, y0: int, mask: np.ndarray, color: RGBA) -> None:
    """Blend ``color`` wherever the boolean ``mask`` placed at (x0, y0) is set."""
    h, w = mask.shape
    cx0 = max(0, x0)
    cy0 = max(0, y0)
    cx1 = min(dst.shape[1], x0 + w)
    cy1 = min(dst.shape[0], y0 + h)
    if cx0 >= cx1 or cy0 >= cy1:
        return
    region = dst[cy0:cy1, cx0:cx1]
    sub = mask[cy0 - y0 : cy1 - y0, cx0 - x0 : cx1 - x0]
    if not np.any(sub):
        return
    pixels = region[sub]
    _blend(pixels, color)
    region[sub] = pixels


def _blend(view: np.ndarray, color: RGBA) -> None:
    a = color[3] / 255.0
    if a >= 1.0:
        view[..., :3] = np.asarray(color[:3], dtype=np.uint8)
    else:
        src = np.asarray(color[:3], dtype=np.float32)
        view[..., :3] = (src * a + view[..., :3].astype(np.float32) * (1.0 - a)).astype(np.uint8)
    view[..., 3] = 255
