"""iconkit: procedural favicon rasterizer with hand-written PNG and ICO encoders."""

__version__ = "0.1.0"
