from .canvas import RGBA, fill_mask, fill_rect, new_canvas
from .draw_lines import draw_line
from .draw_markers import fill_circle
from .draw_text import draw_text, text_size

__all__ = [
    "RGBA",
    "draw_line",
    "draw_text",
    "fill_circle",
    "fill_mask",
    "fill_rect",
    "new_canvas",
    "text_size",
]
