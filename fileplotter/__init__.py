from fileplotter.axis import AxisModel, Margins, PlotRect
from fileplotter.config import PlotterConfig, WindowConfig, load_config
from fileplotter.errors import ArgumentError, FileAccessError, ParseError, PlotterError
from fileplotter.loader import build_scene, load_scene
from fileplotter.points import PlotPoint
from fileplotter.records import ParserConfig, parse_points
from fileplotter.scene import AxisItem, PointItem, Scene, render_scene
from fileplotter.surface import RasterSurface, RenderSurface

__all__ = [
    "ArgumentError",
    "AxisItem",
    "AxisModel",
    "FileAccessError",
    "Margins",
    "ParseError",
    "ParserConfig",
    "PlotPoint",
    "PlotRect",
    "PlotterConfig",
    "PlotterError",
    "PointItem",
    "RasterSurface",
    "RenderSurface",
    "Scene",
    "WindowConfig",
    "build_scene",
    "load_config",
    "load_scene",
    "parse_points",
    "render_scene",
]
