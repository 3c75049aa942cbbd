"""Rasterizer: canvas primitives and the icon glyph."""

from iconkit.render.canvas import Canvas, Color, draw_circle, draw_line, in_rounded_rect
from iconkit.render.glyph import DEFAULT_GLYPH, GlyphSpec, Palette, draw_icon

__all__ = [
    "Canvas",
    "Color",
    "draw_circle",
    "draw_line",
    "in_rounded_rect",
    "DEFAULT_GLYPH",
    "GlyphSpec",
    "Palette",
    "draw_icon",
]
