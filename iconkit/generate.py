"""Generate favicons and the apple-touch icon. Run: python -m iconkit (or `iconkit`)."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from iconkit.codec.ico import encode_ico
from iconkit.codec.png import encode_png
from iconkit.render.glyph import DEFAULT_GLYPH, GlyphSpec, draw_icon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IconTarget:
    filename: str
    size: int


DEFAULT_TARGETS: tuple[IconTarget, ...] = (
    IconTarget("favicon-16.png", 16),
    IconTarget("favicon-32.png", 32),
    IconTarget("apple-touch-icon.png", 180),
)
DEFAULT_ICO_NAME = "favicon.ico"
DEFAULT_ICO_SIZES: tuple[int, ...] = (16, 32)


def render_png(size: int, glyph: GlyphSpec = DEFAULT_GLYPH, level: int = 9) -> bytes:
    return encode_png(draw_icon(size, glyph), level=level)


def _file_mode(path: Path) -> int:
    """Mode for a new file at path: keep an existing file's mode, else 0666 minus the umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_atomic(path: Path, data: bytes) -> None:
    """Write the whole file or nothing: temp file in the same dir, then os.replace."""
    mode = _file_mode(path)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        # mkstemp creates 0600
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise


def generate_icons(
    output_dir: str | Path,
    glyph: GlyphSpec = DEFAULT_GLYPH,
    targets: Sequence[IconTarget] = DEFAULT_TARGETS,
    ico_name: str | None = DEFAULT_ICO_NAME,
    ico_sizes: Sequence[int] = DEFAULT_ICO_SIZES,
    level: int = 9,
) -> dict[str, Path]:
    """
    Render every target, then bundle ico_sizes into ico_name.
    Files are written in order; the first filesystem error stops the run and propagates.
    Returns filename -> written path.
    """
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    # Each size is rendered once even if several outputs use it
    pngs: dict[int, bytes] = {}

    def png_for(size: int) -> bytes:
        if size not in pngs:
            pngs[size] = render_png(size, glyph, level)
        return pngs[size]

    files: list[tuple[str, bytes]] = [(t.filename, png_for(t.size)) for t in targets]
    if ico_name and ico_sizes:
        files.append((ico_name, encode_ico([(s, png_for(s)) for s in ico_sizes])))

    written: dict[str, Path] = {}
    for filename, data in files:
        path = out_dir / filename
        try:
            write_atomic(path, data)
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            raise
        logger.info("Wrote %s", path, extra={"icon_file": filename, "bytes": len(data)})
        written[filename] = path
    return written
