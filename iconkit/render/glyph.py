"""Icon composition: rounded gradient tile, accent dot and check/arrow strokes."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from iconkit.render.canvas import (
    Canvas,
    draw_circle,
    draw_line,
    fill_gradient,
    round_half_up,
)

Channel = Annotated[int, Field(ge=0, le=255)]
RGB = tuple[Channel, Channel, Channel]
Point = tuple[int, int]


class Palette(BaseModel):
    """Colors used by the icon. Alpha is always opaque."""

    model_config = ConfigDict(frozen=True)

    top: RGB = (0x0B, 0x12, 0x20)
    bottom: RGB = (0x11, 0x18, 0x27)
    ink: RGB = (0xE2, 0xE8, 0xF0)
    accent: RGB = (0x14, 0xB8, 0xA6)


class GlyphSpec(BaseModel):
    """Fixed glyph layout. Ratios are relative to the icon size; segments use a `grid`-unit grid."""

    model_config = ConfigDict(frozen=True)

    palette: Palette = Field(default_factory=Palette)
    segments: tuple[tuple[Point, Point], ...] = (
        ((22, 30), (30, 36)),
        ((30, 36), (22, 42)),
        ((34, 42), (44, 42)),
    )
    grid: int = Field(default=64, gt=0)
    corner_ratio: float = 0.22
    dot_radius_ratio: float = 0.08
    dot_x_ratio: float = 0.31
    dot_y_ratio: float = 0.34
    stroke_ratio: float = 0.08


DEFAULT_GLYPH = GlyphSpec()


def draw_icon(size: int, glyph: GlyphSpec = DEFAULT_GLYPH) -> Canvas:
    """Rasterize the glyph onto a new size x size canvas."""
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"Icon size must be a positive integer, got {size!r}")
    palette = glyph.palette
    canvas = Canvas(size, size)

    fill_gradient(canvas, palette.top, palette.bottom, round_half_up(size * glyph.corner_ratio))

    dot_radius = max(1, round_half_up(size * glyph.dot_radius_ratio))
    draw_circle(
        canvas,
        round_half_up(size * glyph.dot_x_ratio),
        round_half_up(size * glyph.dot_y_ratio),
        dot_radius,
        palette.accent,
    )

    stroke = max(1, round_half_up(size * glyph.stroke_ratio))
    scale = size / glyph.grid
    for (x1, y1), (x2, y2) in glyph.segments:
        draw_line(
            canvas,
            round_half_up(x1 * scale),
            round_half_up(y1 * scale),
            round_half_up(x2 * scale),
            round_half_up(y2 * scale),
            stroke,
            palette.ink,
        )
    return canvas
