from __future__ import annotations

import logging
import tkinter as tk

from PIL import ImageTk

from fileplotter.config import WindowConfig
from fileplotter.scene import Scene, render_scene

LOGGER = logging.getLogger(__name__)


class PlotWindow:
    """Desktop window that repaints the scene whenever its canvas is resized.

    The scene must be fully built before the window is created; repaints read
    it without modification on the tk thread.
    """

    def __init__(self, scene: Scene, config: WindowConfig | None = None) -> None:
        self._scene = scene
        self._config = config or WindowConfig()
        self._root = tk.Tk()
        self._root.title(self._config.title)
        self._root.geometry(f"{self._config.width}x{self._config.height}")
        self._canvas = tk.Canvas(self._root, borderwidth=0, highlightthickness=0)
        self._canvas.pack(fill=tk.BOTH, expand=True)
        self._image_id = self._canvas.create_image(0, 0, anchor=tk.NW)
        self._photo: ImageTk.PhotoImage | None = None
        self._size: tuple[int, int] | None = None
        self._canvas.bind("<Configure>", self._on_configure)

    def run(self) -> None:
        self._root.mainloop()

    def repaint(self, width: int, height: int) -> None:
        surface = render_scene(self._scene, width, height, background=self._config.background)
        # keep a reference: tk drops images that are garbage collected
        self._photo = ImageTk.PhotoImage(surface.to_image())
        self._canvas.itemconfigure(self._image_id, image=self._photo)
        LOGGER.debug("repainted %dx%d", width, height)

    def _on_configure(self, event: tk.Event) -> None:
        size = (max(1, int(event.width)), max(1, int(event.height)))
        if size == self._size:
            return
        self._size = size
        self.repaint(*size)
