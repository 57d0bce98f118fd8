from __future__ import annotations

import importlib
import sys
import types
import unittest
from unittest import mock

from fileplotter.axis import AxisModel
from fileplotter.config import WindowConfig
from fileplotter.points import PlotPoint
from fileplotter.scene import Scene, render_scene


def _import_window_module() -> types.ModuleType:
    # tkinter is stubbed so the window module imports without a Tk install
    stubs = {"tkinter": mock.MagicMock(), "PIL.ImageTk": mock.MagicMock()}
    with mock.patch.dict(sys.modules, stubs):
        sys.modules.pop("fileplotter.window", None)
        return importlib.import_module("fileplotter.window")


class PlotWindowTests(unittest.TestCase):
    def setUp(self) -> None:
        module = _import_window_module()
        points = [PlotPoint(3, 5), PlotPoint(10, 2, color=(255, 0, 0))]
        self.scene = Scene.build(AxisModel.from_points(points), points)
        self.tk = self._patch(module, "tk")
        self.image_tk = self._patch(module, "ImageTk")
        self.render = self._patch(module, "render_scene", wraps=render_scene)
        self.window = module.PlotWindow(self.scene, WindowConfig(width=320, height=200, title="Survey"))
        self.canvas = self.tk.Canvas.return_value

    def _patch(self, module: types.ModuleType, name: str, **kwargs) -> mock.MagicMock:
        patcher = mock.patch.object(module, name, **kwargs)
        patched = patcher.start()
        self.addCleanup(patcher.stop)
        return patched

    def test_window_is_configured_and_bound(self) -> None:
        root = self.tk.Tk.return_value
        root.title.assert_called_once_with("Survey")
        root.geometry.assert_called_once_with("320x200")
        self.canvas.bind.assert_called_once_with("<Configure>", self.window._on_configure)
        self.render.assert_not_called()

    def test_configure_repaints_once_per_size(self) -> None:
        on_configure = self.canvas.bind.call_args.args[1]
        on_configure(types.SimpleNamespace(width=320, height=200))
        on_configure(types.SimpleNamespace(width=320, height=200))
        on_configure(types.SimpleNamespace(width=400, height=300))

        self.assertEqual([c.args[1:3] for c in self.render.call_args_list], [(320, 200), (400, 300)])
        for c in self.render.call_args_list:
            self.assertIs(c.args[0], self.scene)
        image = self.image_tk.PhotoImage.call_args.args[0]
        self.assertEqual(image.size, (400, 300))

        photo = self.image_tk.PhotoImage.return_value
        self.canvas.itemconfigure.assert_called_with(self.canvas.create_image.return_value, image=photo)
        self.assertIs(self.window._photo, photo)

    def test_zero_sized_configure_still_paints(self) -> None:
        self.window._on_configure(types.SimpleNamespace(width=0, height=0))
        self.assertEqual(self.render.call_args.args[1:3], (1, 1))

    def test_run_enters_main_loop(self) -> None:
        self.window.run()
        self.tk.Tk.return_value.mainloop.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
