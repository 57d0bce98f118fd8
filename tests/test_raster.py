from __future__ import annotations

import unittest

import numpy as np

from fileplotter.raster import draw_line, draw_text, fill_circle, fill_rect, new_canvas, text_size
from fileplotter.surface import RasterSurface, to_rgba


BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def _painted(canvas: np.ndarray) -> np.ndarray:
    return np.any(canvas[:, :, :3] != 255, axis=2)


class CanvasTests(unittest.TestCase):
    def test_new_canvas_is_filled(self) -> None:
        canvas = new_canvas(4, 3, color=(1, 2, 3, 255))
        self.assertEqual(canvas.shape, (3, 4, 4))
        self.assertEqual(canvas.dtype, np.uint8)
        self.assertTrue(np.all(canvas[:, :] == [1, 2, 3, 255]))

    def test_new_canvas_rejects_empty_size(self) -> None:
        with self.assertRaises(ValueError):
            new_canvas(0, 10)

    def test_fill_rect_clips_to_canvas(self) -> None:
        canvas = new_canvas(10, 10, color=WHITE)
        fill_rect(canvas, -5, -5, 2, 2, BLACK)
        painted = _painted(canvas)
        self.assertTrue(np.all(painted[0:3, 0:3]))
        self.assertEqual(int(painted.sum()), 9)

    def test_fill_rect_blends_alpha(self) -> None:
        canvas = new_canvas(2, 2, color=WHITE)
        fill_rect(canvas, 0, 0, 0, 0, (0, 0, 0, 128))
        self.assertTrue(120 <= int(canvas[0, 0, 0]) <= 130)
        self.assertEqual(int(canvas[0, 0, 3]), 255)


class LineTests(unittest.TestCase):
    def test_horizontal_line_width_one(self) -> None:
        canvas = new_canvas(20, 10, color=WHITE)
        draw_line(canvas, 2, 5, 12, 5, BLACK)
        painted = _painted(canvas)
        self.assertTrue(np.all(painted[5, 2:13]))
        self.assertEqual(int(painted.sum()), 11)

    def test_width_two_line_covers_two_rows(self) -> None:
        canvas = new_canvas(20, 10, color=WHITE)
        draw_line(canvas, 2, 5, 12, 5, BLACK, width=2)
        painted = _painted(canvas)
        self.assertEqual(sorted(set(np.nonzero(painted)[0].tolist())), [4, 5])

    def test_diagonal_line_hits_endpoints(self) -> None:
        canvas = new_canvas(20, 20, color=WHITE)
        draw_line(canvas, 1, 1, 15, 9, BLACK)
        painted = _painted(canvas)
        self.assertTrue(painted[1, 1])
        self.assertTrue(painted[9, 15])
        self.assertEqual(int(painted.sum()), 15)

    def test_offscreen_line_is_ignored(self) -> None:
        canvas = new_canvas(5, 5, color=WHITE)
        draw_line(canvas, 10, 10, 20, 20, BLACK)
        self.assertFalse(np.any(_painted(canvas)))


class CircleTests(unittest.TestCase):
    def test_diameter_matches_size(self) -> None:
        canvas = new_canvas(30, 30, color=WHITE)
        fill_circle(canvas, 10, 10, 3.5, BLACK)
        painted = _painted(canvas)
        self.assertEqual(np.nonzero(painted[10])[0].tolist(), list(range(7, 14)))
        self.assertEqual(np.nonzero(painted[:, 10])[0].tolist(), list(range(7, 14)))
        self.assertFalse(painted[7, 7])

    def test_partially_offscreen_circle(self) -> None:
        canvas = new_canvas(10, 10, color=WHITE)
        fill_circle(canvas, 0, 0, 3.5, BLACK)
        painted = _painted(canvas)
        self.assertTrue(painted[0, 0])
        self.assertTrue(painted[0, 3])
        self.assertFalse(painted[0, 4])

    def test_zero_radius_draws_nothing(self) -> None:
        canvas = new_canvas(10, 10, color=WHITE)
        fill_circle(canvas, 5, 5, 0, BLACK)
        self.assertFalse(np.any(_painted(canvas)))

    def test_huge_radius_is_clipped_to_canvas(self) -> None:
        canvas = new_canvas(12, 8, color=WHITE)
        fill_circle(canvas, 1, 1, 20000.0, BLACK)
        self.assertTrue(np.all(_painted(canvas)))

    def test_circle_far_outside_canvas_draws_nothing(self) -> None:
        canvas = new_canvas(10, 10, color=WHITE)
        fill_circle(canvas, 1e300, 5, 3.5, BLACK)
        fill_circle(canvas, 5, -1e300, 3.5, BLACK)
        self.assertFalse(np.any(_painted(canvas)))

    def test_non_finite_center_draws_nothing(self) -> None:
        canvas = new_canvas(10, 10, color=WHITE)
        fill_circle(canvas, float("-inf"), 5, 3.5, BLACK)
        fill_circle(canvas, 5, float("nan"), 3.5, BLACK)
        self.assertFalse(np.any(_painted(canvas)))


class TextTests(unittest.TestCase):
    def test_text_is_drawn_inside_its_box(self) -> None:
        canvas = new_canvas(120, 40, color=WHITE)
        draw_text(canvas, 5, 5, "128", BLACK, font_size_px=18.0)
        painted = _painted(canvas)
        self.assertTrue(np.any(painted))
        self.assertFalse(np.any(painted[:5, :]))
        self.assertFalse(np.any(painted[:, :5]))

    def test_text_size(self) -> None:
        w, h = text_size("10")
        self.assertGreater(w, 0)
        self.assertGreater(h, 0)
        self.assertGreater(text_size("1000")[0], w)
        self.assertEqual(text_size(""), (0, 0))

    def test_empty_text_is_noop(self) -> None:
        canvas = new_canvas(10, 10, color=WHITE)
        draw_text(canvas, 0, 0, "", BLACK)
        self.assertFalse(np.any(_painted(canvas)))


class RasterSurfaceTests(unittest.TestCase):
    def test_surface_primitives(self) -> None:
        surface = RasterSurface(50, 40)
        self.assertEqual(surface.size(), (50, 40))
        surface.draw_line((0.4, 10.2), (49.6, 10.2), (255, 0, 0))
        surface.fill_circle((25.0, 25.0), 3.5, (0, 0, 255))
        self.assertEqual(surface.rgba[10, 30].tolist(), [255, 0, 0, 255])
        self.assertEqual(surface.rgba[25, 25].tolist(), [0, 0, 255, 255])

    def test_text_sits_above_baseline(self) -> None:
        surface = RasterSurface(80, 40)
        surface.draw_text((10, 30), "55", (0, 0, 0))
        painted = _painted(surface.rgba)
        rows = np.nonzero(np.any(painted, axis=1))[0]
        self.assertGreater(rows.size, 0)
        self.assertLess(int(rows.max()), 30)

    def test_out_of_range_channels_are_clipped(self) -> None:
        self.assertEqual(to_rgba((300, -4, 999)), (255, 0, 255, 255))

    def test_rejects_empty_surface(self) -> None:
        with self.assertRaises(ValueError):
            RasterSurface(0, 5)


if __name__ == "__main__":
    unittest.main()
