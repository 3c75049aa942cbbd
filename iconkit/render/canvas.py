"""RGBA pixel canvas and raster primitives. Pure functions, no I/O."""

from __future__ import annotations

import math

Color = tuple[int, int, int]

OPAQUE = 255


def round_half_up(value: float) -> int:
    """Round .5 upwards (2.5 -> 3), unlike Python's round()."""
    return math.floor(value + 0.5)


class Canvas:
    """Square or rectangular RGBA buffer, row-major, origin top-left. Starts fully transparent."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * 4)

    def set_pixel(self, x: int, y: int, color: Color, alpha: int = OPAQUE) -> None:
        # Out-of-range writes are clipped
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return
        idx = (y * self.width + x) * 4
        self.pixels[idx] = color[0]
        self.pixels[idx + 1] = color[1]
        self.pixels[idx + 2] = color[2]
        self.pixels[idx + 3] = alpha

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        idx = (y * self.width + x) * 4
        return tuple(self.pixels[idx : idx + 4])  # type: ignore[return-value]

    def row(self, y: int) -> bytes:
        stride = self.width * 4
        return bytes(self.pixels[y * stride : (y + 1) * stride])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.pixels == other.pixels
        )

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"


def lerp(a: int, b: int, t: float) -> int:
    return round_half_up(a + (b - a) * t)


def gradient_color(top: Color, bottom: Color, t: float) -> Color:
    return (lerp(top[0], bottom[0], t), lerp(top[1], bottom[1], t), lerp(top[2], bottom[2], t))


def in_rounded_rect(x: int, y: int, size: int, radius: int) -> bool:
    """True if (x, y) lies inside a size x size square with corners rounded by radius."""
    if radius <= x < size - radius:
        return True
    if radius <= y < size - radius:
        return True
    rx = radius if x < radius else size - radius - 1
    ry = radius if y < radius else size - radius - 1
    dx = x - rx
    dy = y - ry
    return dx * dx + dy * dy <= radius * radius


def in_circle(dx: float, dy: float, radius: float) -> bool:
    return dx * dx + dy * dy <= radius * radius


def fill_gradient(canvas: Canvas, top: Color, bottom: Color, radius: int) -> None:
    """Vertical gradient from top to bottom, masked to a rounded rectangle."""
    size = canvas.width
    span = canvas.height - 1
    for y in range(canvas.height):
        color = gradient_color(top, bottom, y / span if span else 0.0)
        for x in range(size):
            if in_rounded_rect(x, y, size, radius):
                canvas.set_pixel(x, y, color)


def draw_circle(canvas: Canvas, cx: float, cy: float, radius: float, color: Color) -> None:
    """Filled circle; only the bounding box is scanned."""
    x0 = math.floor(cx - radius)
    x1 = math.ceil(cx + radius)
    y0 = math.floor(cy - radius)
    y1 = math.ceil(cy + radius)
    for y in range(y0, y1 + 1):
        for x in range(x0, x1 + 1):
            if in_circle(x - cx, y - cy, radius):
                canvas.set_pixel(x, y, color)


def line_points(x1: int, y1: int, x2: int, y2: int) -> list[tuple[int, int]]:
    """Integer points of a Bresenham walk from (x1, y1) to (x2, y2), both endpoints included."""
    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy
    x, y = x1, y1
    points = []
    while True:
        points.append((x, y))
        if x == x2 and y == y2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return points


def draw_line(
    canvas: Canvas, x1: int, y1: int, x2: int, y2: int, thickness: int, color: Color
) -> None:
    """Thick stroke: stamp a filled circle at every point of the line."""
    radius = max(1, thickness // 2)
    for x, y in line_points(x1, y1, x2, y2):
        draw_circle(canvas, x, y, radius, color)
