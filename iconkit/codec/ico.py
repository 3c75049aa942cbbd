"""ICO container with PNG-compressed images (Vista+ format)."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Sequence

HEADER_SIZE = 6
ENTRY_SIZE = 16
ICON_TYPE = 1
BITS_PER_PIXEL = 32
MAX_SIZE = 256


def ico_dimension_byte(size: int) -> int:
    """ICO stores dimensions in one byte; 0 means 256."""
    if not 1 <= size <= MAX_SIZE:
        raise ValueError(f"ICO image size must be 1..{MAX_SIZE}, got {size}")
    return 0 if size == MAX_SIZE else size


@dataclass(frozen=True)
class IconDirEntry:
    size: int
    data_size: int
    offset: int

    def to_bytes(self) -> bytes:
        dim = ico_dimension_byte(self.size)
        # width, height, color count, reserved, planes, bpp, bytes in resource, offset
        # planes=1 as the original favicon writer emits
        return struct.pack("<BBBBHHII", dim, dim, 0, 0, 1, BITS_PER_PIXEL, self.data_size, self.offset)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "IconDirEntry":
        width, _height, _colors, _reserved, _planes, _bpp, data_size, offset = struct.unpack(
            "<BBBBHHII", raw
        )
        return cls(size=width or MAX_SIZE, data_size=data_size, offset=offset)


def encode_ico(images: Sequence[tuple[int, bytes]]) -> bytes:
    """Bundle (size, png_bytes) pairs into one ICO file, keeping input order."""
    if not images:
        raise ValueError("ICO needs at least one image")
    count = len(images)
    header = struct.pack("<HHH", 0, ICON_TYPE, count)
    entries = []
    offset = HEADER_SIZE + ENTRY_SIZE * count
    for size, png in images:
        entries.append(IconDirEntry(size=size, data_size=len(png), offset=offset).to_bytes())
        offset += len(png)
    return header + b"".join(entries) + b"".join(png for _, png in images)


def read_ico(data: bytes) -> list[tuple[IconDirEntry, bytes]]:
    """Parse the directory and slice each image payload by its recorded offset."""
    if len(data) < HEADER_SIZE:
        raise ValueError("Truncated ICO header")
    reserved, kind, count = struct.unpack_from("<HHH", data, 0)
    if reserved != 0 or kind != ICON_TYPE:
        raise ValueError(f"Not an icon file: reserved={reserved} type={kind}")
    if HEADER_SIZE + ENTRY_SIZE * count > len(data):
        raise ValueError(f"Truncated ICO directory ({count} entries)")
    out = []
    for i in range(count):
        start = HEADER_SIZE + ENTRY_SIZE * i
        entry = IconDirEntry.from_bytes(data[start : start + ENTRY_SIZE])
        if entry.offset + entry.data_size > len(data):
            raise ValueError(f"ICO entry {i} points past end of file")
        out.append((entry, data[entry.offset : entry.offset + entry.data_size]))
    return out
